"""
List + modal editor shared by the simple registration screens.

The editor is either showing the list or editing a draft. Saving replaces the
record with the same id or appends a new one with a generated id; deleting
asks for confirmation first.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Type

from pydantic import BaseModel, ValidationError

from ..config import logger as log
from ..container import get_container
from ..domain.payment_method import PaymentMethod
from ..domain.specialty import Specialty
from ..models.forms import PaymentMethodForm, SpecialtyForm
from ..repositories.interfaces.crud_repository import ICrudRepository, T
from .results import OperationResult

# (title, message) -> True when the user confirms
ConfirmPrompt = Callable[[str, str], bool]

LIST = "list"
EDITING = "editing"


@dataclass(frozen=True)
class CrudMessages:
    saved: str
    delete_title: str
    delete_question: str
    deleted: str


class CrudEditor(Generic[T]):
    """Two-state (list/editing) editor bound to one repository."""

    def __init__(
        self,
        repository: ICrudRepository[T],
        record_class: Type[T],
        form_class: Type[BaseModel],
        messages: CrudMessages,
        context: str,
    ):
        self.repository = repository
        self.record_class = record_class
        self.form_class = form_class
        self.messages = messages
        self._context = f"crud.{context}"
        self.state = LIST
        self.editing: Optional[T] = None
        self.draft: dict = {}

    @property
    def is_editing(self) -> bool:
        return self.state == EDITING

    def items(self) -> list[T]:
        return self.repository.get_all()

    def default_draft(self) -> dict:
        return {"name": "", "active": True}

    def open(self, record: Optional[T] = None) -> None:
        """Opens the modal with a copy of ``record`` or an empty draft."""
        self.editing = record
        self.draft = record.to_dict() if record is not None else self.default_draft()
        self.state = EDITING

    def close(self) -> None:
        self.state = LIST
        self.editing = None
        self.draft = {}

    def update_draft(self, **fields) -> None:
        self.draft.update(fields)

    def submit(self) -> OperationResult:
        if not self.is_editing:
            return OperationResult(False, "Nenhum registro em edição.")

        data = dict(self.draft)
        data["id"] = self.editing.id if self.editing is not None else None
        try:
            form = self.form_class(**data)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = ".".join(str(p) for p in error["loc"])
            log.debug(self._context, "Validation failed", field=field_name, error=error["msg"])
            return OperationResult(False, f"{field_name}: {error['msg']}")

        values = form.model_dump()
        if self.editing is not None:
            merged = {**self.editing.to_dict(), **values}
            record = self.record_class.from_dict(merged)
        else:
            values["id"] = ""
            record = self.record_class.from_dict(values)

        saved = self.repository.save(record)
        log.info(self._context, "Saved", record_id=saved.id, new=self.editing is None)
        self.close()
        return OperationResult(True, self.messages.saved, saved)

    def delete(self, record_id: str, confirm: ConfirmPrompt) -> OperationResult:
        if not confirm(self.messages.delete_title, self.messages.delete_question):
            return OperationResult(False, "")
        self.repository.delete(record_id)
        log.info(self._context, "Deleted", record_id=record_id)
        return OperationResult(True, self.messages.deleted)

    def toggle_status(self, record_id: str, active: bool) -> bool:
        changed = self.repository.set_active(record_id, active)
        log.debug(self._context, "Status toggled", record_id=record_id, active=active, changed=changed)
        return changed


SPECIALTY_MESSAGES = CrudMessages(
    saved="Especialidade salva com sucesso.",
    delete_title="Excluir Especialidade",
    delete_question="Tem certeza que deseja excluir esta especialidade?",
    deleted="Especialidade excluída com sucesso.",
)

PAYMENT_METHOD_MESSAGES = CrudMessages(
    saved="Forma de pagamento salva com sucesso.",
    delete_title="Excluir Forma de Pagamento",
    delete_question="Tem certeza que deseja excluir esta forma de pagamento?",
    deleted="Forma de pagamento excluída com sucesso.",
)


def specialty_editor() -> CrudEditor[Specialty]:
    return CrudEditor(
        get_container().specialties, Specialty, SpecialtyForm, SPECIALTY_MESSAGES, "specialty"
    )


def payment_method_editor() -> CrudEditor[PaymentMethod]:
    return CrudEditor(
        get_container().payment_methods,
        PaymentMethod,
        PaymentMethodForm,
        PAYMENT_METHOD_MESSAGES,
        "payment_method",
    )
