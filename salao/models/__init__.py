"""
Modelos de formulário (pydantic) das telas de cadastro
"""
from .forms import ClientForm, NamedRecordForm, PaymentMethodForm, SpecialtyForm

__all__ = [
    "ClientForm",
    "NamedRecordForm",
    "PaymentMethodForm",
    "SpecialtyForm",
]
