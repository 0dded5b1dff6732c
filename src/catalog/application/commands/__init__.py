"""
Catalog Application Commands
"""
from src.catalog.application.commands.category_commands import (
    CreateCategoryCommand,
    CreateCategoryCommandHandler,
    DeleteCategoryCommand,
    DeleteCategoryCommandHandler,
    UpdateCategoryCommand,
    UpdateCategoryCommandHandler,
)
from src.catalog.application.commands.product_commands import (
    CreateProductCommandHandler,
    DeleteProductCommand,
    DeleteProductCommandHandler,
    SaveProductCommand,
    UpdateProductCommandHandler,
)

__all__ = [
    "CreateCategoryCommand",
    "CreateCategoryCommandHandler",
    "CreateProductCommandHandler",
    "DeleteCategoryCommand",
    "DeleteCategoryCommandHandler",
    "DeleteProductCommand",
    "DeleteProductCommandHandler",
    "SaveProductCommand",
    "UpdateCategoryCommand",
    "UpdateCategoryCommandHandler",
    "UpdateProductCommandHandler",
]
