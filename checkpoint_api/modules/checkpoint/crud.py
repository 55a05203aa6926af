"""CRUD operations for code checkpoint entities using FastCRUD."""

from fastcrud import FastCRUD

from .models import CodeCheckpoint

checkpoint_crud: FastCRUD = FastCRUD(CodeCheckpoint)
