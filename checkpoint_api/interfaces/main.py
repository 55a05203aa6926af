from ..infrastructure.app_factory import create_application
from ..infrastructure.config.settings import get_settings
from ..interfaces.api import router as api_router

settings = get_settings()

app = create_application(
    router=api_router,
    settings=settings,
    summary="REST API for storing and searching code checkpoints",
    description="""
    # Code Checkpoint API

    Keep track of code snippets worth coming back to:

    * **Checkpoints**: create, list, read, update and delete code checkpoints
    * **Search**: filter by keywords, language and tags, page through results
    * **Similarity ordering**: rank results by dot product with a query embedding
    * **Statistics**: language and tag distribution at a glance
    """,
)
