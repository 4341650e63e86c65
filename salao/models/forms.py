"""
Formulários - validação dos dados digitados nas telas de cadastro
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..utils.formatters import only_digits


class NamedRecordForm(BaseModel):
    """
    Formulário base dos cadastros simples (nome + status).
    Usado pelo editor genérico de lista/modal.
    """

    id: Optional[str] = Field(None, description="ID do registro; vazio para um novo")
    name: str = Field(..., min_length=1, description="Nome exibido na lista")
    active: bool = Field(default=True)

    class Config:
        str_strip_whitespace = True


class SpecialtyForm(NamedRecordForm):
    """Especialidade de um profissional (Barbeiro, Manicure...)."""


class PaymentMethodForm(NamedRecordForm):
    """Forma de pagamento aceita no PDV."""


class ClientForm(BaseModel):
    """
    Cadastro rápido de cliente, feito pelo lojista ou pelo próprio cliente.
    """

    name: str = Field(..., min_length=1, description="Nome completo")
    phone: str = Field(default="", description="Telefone com DDD")
    email: Optional[str] = Field(None, description="Email de login")
    cpf: Optional[str] = Field(None, description="CPF, com ou sem máscara")
    birth_date: Optional[date] = Field(None, description="Data de nascimento")

    class Config:
        str_strip_whitespace = True

    @field_validator("email", "cpf")
    @classmethod
    def empty_as_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @field_validator("cpf")
    @classmethod
    def cpf_has_eleven_digits(cls, value: Optional[str]) -> Optional[str]:
        if value and len(only_digits(value)) != 11:
            raise ValueError("CPF deve ter 11 dígitos")
        return value
