"""
Base Service Classes.

Provides the shared CRUD + spreadsheet transfer flow for inventory entities:
- Use Repository for data access (not direct queries)
- Run every write through the Pydantic write models
- Convert rows to Pydantic output DTOs

Architecture:
    Router (thin) → Service (business logic) → Repository (data access) → Model

Usage:
    from inventory_api.services.base_service import BaseCRUDService

    class IngredientService(BaseCRUDService[Ingredient, IngredientOutput]):
        def __init__(self, db: Session):
            super().__init__(
                repo=IngredientRepository(db),
                output_schema=IngredientOutput,
                entity_name="Ingredient",
                validate=validate_ingredient,
                validate_patch=validate_ingredient_patch,
            )
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Mapping, Sequence, Type, TypeVar

from pydantic import BaseModel

from inventory_api.repositories import BaseRepository
from inventory_api.services.spreadsheet import read_rows
from inventory_api.services.transfer import ImportOutcome, export_workbook, import_rows
from inventory_api.services.validation import ValidationResult
from shared.config.logging import get_logger
from shared.utils.exceptions import NotFoundError, ValidationError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT")
OutputT = TypeVar("OutputT", bound=BaseModel)

Validator = Callable[[Any], ValidationResult]


class BaseCRUDService(Generic[ModelT, OutputT]):
    """
    Base service for entities with CRUD operations and spreadsheet transfer.

    Responsibilities:
    - Data access via Repository
    - Validation/normalization before every write
    - DTO transformation via output schema
    """

    # Whether update() 404s before validating the payload
    check_exists_before_validation: bool = False

    def __init__(
        self,
        repo: BaseRepository[ModelT],
        output_schema: Type[OutputT],
        entity_name: str,
        validate: Validator,
        validate_patch: Validator,
        *,
        export_columns: Sequence[tuple[str, str]] = (),
        export_sheet: str = "",
        header_aliases: Mapping[str, str] | None = None,
    ):
        self._repo = repo
        self._output_schema = output_schema
        self._entity_name = entity_name
        self._validate = validate
        self._validate_patch = validate_patch
        self._export_columns = export_columns
        self._export_sheet = export_sheet
        self._header_aliases = header_aliases or {}

    @property
    def repo(self) -> BaseRepository[ModelT]:
        """Repository for data access."""
        return self._repo

    @property
    def entity_name(self) -> str:
        """Human-readable entity name for messages."""
        return self._entity_name

    def to_output(self, entity: ModelT) -> OutputT:
        return self._output_schema.model_validate(entity)

    # =========================================================================
    # Read Operations
    # =========================================================================

    def list_all(self) -> list[OutputT]:
        """All entities ordered by name."""
        return [self.to_output(e) for e in self._repo.find_all()]

    def get_entity(self, entity_id: int) -> ModelT:
        """
        Raw entity (for internal use).

        Raises:
            NotFoundError: If entity not found.
        """
        entity = self._repo.find_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)
        return entity

    def get_by_id(self, entity_id: int) -> OutputT:
        return self.to_output(self.get_entity(entity_id))

    # =========================================================================
    # Write Operations
    # =========================================================================

    def _checked(self, result: ValidationResult) -> dict[str, Any]:
        if not result.ok:
            raise ValidationError(
                f"Invalid {self._entity_name.lower()} data",
                errors=result.errors,
            )
        return result.data

    def create(self, raw: Any) -> OutputT:
        """
        Validate and insert.

        Raises:
            ValidationError: with every failing field.
            UpstreamError: if the insert fails.
        """
        data = self._checked(self._validate(raw))
        entity = self._repo.create(data)
        logger.info(f"{self._entity_name} created", entity_id=entity.id)
        return self.to_output(entity)

    def update(self, entity_id: int, raw: Any) -> OutputT:
        """
        Merge the supplied fields onto the existing row.

        Raises:
            ValidationError: with every failing field.
            NotFoundError: If entity not found.
        """
        if self.check_exists_before_validation:
            entity = self.get_entity(entity_id)
            patch = self._checked(self._validate_patch(raw))
        else:
            patch = self._checked(self._validate_patch(raw))
            entity = self.get_entity(entity_id)

        entity = self._repo.update(entity, patch)
        logger.info(f"{self._entity_name} updated", entity_id=entity_id, fields=sorted(patch))
        return self.to_output(entity)

    def delete(self, entity_id: int) -> None:
        """
        Hard delete.

        Raises:
            NotFoundError: If entity not found.
        """
        entity = self.get_entity(entity_id)
        self._repo.delete(entity)
        logger.info(f"{self._entity_name} deleted", entity_id=entity_id)

    # =========================================================================
    # Spreadsheet Transfer
    # =========================================================================

    def export_workbook(self) -> bytes:
        """All entities as an .xlsx workbook with the fixed export columns."""
        return export_workbook(self._repo.find_all(), self._export_columns, self._export_sheet)

    def import_file(self, content: bytes, filename: str | None) -> ImportOutcome:
        """
        Import every row of the first sheet.

        Raises:
            SpreadsheetError: the file cannot be parsed at all.
        """
        rows = read_rows(content, filename)
        outcome = import_rows(
            rows,
            self._header_aliases,
            self._validate,
            self._repo.create,
            entity=self._entity_name,
        )
        outcome.imported = [self.to_output(e) for e in outcome.imported]
        return outcome
