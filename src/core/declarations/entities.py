"""
Entidades do Domínio de Declarações Aduaneiras.

Entidades:
- DeclarationStatus: Estados da declaração
- DeclarationEntity: Declaração aduaneira de um cliente

Regras de Negócio Encapsuladas:
- Toda declaração nasce PENDING
- Só PENDING pode ser editada ou removida
- Revisão: PENDING → APPROVED | REJECTED, registrando reviewed_at
- Valor, peso e quantidade assumem 0 quando ausentes; valor não pode ser negativo
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
import uuid

from src.core.shared.exceptions import BusinessRuleViolationError, ValidationError
from src.core.shared.validation import is_blank


class DeclarationStatus(Enum):
    """
    Estados possíveis de uma declaração.

    Fluxo de Estados:
        PENDING → APPROVED
                → REJECTED
    (APPROVED e REJECTED são terminais)
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @classmethod
    def from_string(cls, value: str) -> "DeclarationStatus":
        """
        Raises:
            ValueError: Se valor inválido
        """
        try:
            return cls[value.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Status inválido: {value}")

    @property
    def is_terminal(self) -> bool:
        return self != DeclarationStatus.PENDING


ZERO = Decimal("0")


@dataclass
class DeclarationEntity:
    """
    Entidade de Domínio: Declaração Aduaneira.

    Attributes:
        id: Identificador único (UUID)
        declaration_number: Número sequencial "TD-<ano>-<00000>"
        client_id: ID do cliente declarante
        declaration_type: Tipo (importação, exportação, trânsito...)
        tnved_code: Código TN VED (classificação de mercadoria)
        product_description: Descrição da mercadoria
        product_value: Valor declarado
        net_weight: Peso líquido
        quantity: Quantidade
        country_of_origin: País de origem
        country_of_destination: País de destino
        customs_office: Posto aduaneiro
        status: Estado atual
        submitted_at: Data/hora de envio
        reviewed_at: Data/hora da revisão (aprovação ou rejeição)
    """

    declaration_number: str
    client_id: str
    declaration_type: str
    product_description: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    tnved_code: Optional[str] = None
    product_value: Decimal = ZERO
    net_weight: Decimal = ZERO
    quantity: int = 0
    country_of_origin: Optional[str] = None
    country_of_destination: Optional[str] = None
    customs_office: Optional[str] = None
    status: DeclarationStatus = DeclarationStatus.PENDING
    submitted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    reviewed_at: Optional[datetime] = None

    @classmethod
    def criar(
        cls,
        declaration_number: str,
        client_id: str,
        declaration_type: str,
        product_description: str,
        tnved_code: Optional[str] = None,
        product_value: Optional[Decimal] = None,
        net_weight: Optional[Decimal] = None,
        quantity: Optional[int] = None,
        country_of_origin: Optional[str] = None,
        country_of_destination: Optional[str] = None,
        customs_office: Optional[str] = None,
        agora: Optional[datetime] = None,
    ) -> "DeclarationEntity":
        """
        Factory method: nova declaração PENDING.

        Raises:
            ValidationError: Se dados obrigatórios ausentes ou valor negativo
        """
        cls.validar_campos(declaration_type, product_description, product_value)

        return cls(
            declaration_number=declaration_number,
            client_id=client_id,
            declaration_type=declaration_type.strip(),
            product_description=product_description.strip(),
            tnved_code=tnved_code,
            product_value=product_value if product_value is not None else ZERO,
            net_weight=net_weight if net_weight is not None else ZERO,
            quantity=quantity if quantity is not None else 0,
            country_of_origin=country_of_origin,
            country_of_destination=country_of_destination,
            customs_office=customs_office,
            status=DeclarationStatus.PENDING,
            submitted_at=agora or datetime.now(timezone.utc),
        )

    @staticmethod
    def validar_campos(
        declaration_type: Optional[str],
        product_description: Optional[str],
        product_value: Optional[Decimal],
    ) -> None:
        if is_blank(declaration_type):
            raise ValidationError("Tipo de declaração é obrigatório", field="declaration_type")
        if is_blank(product_description):
            raise ValidationError(
                "Descrição do produto é obrigatória",
                field="product_description",
            )
        if product_value is not None and product_value < 0:
            raise ValidationError(
                "Valor do produto não pode ser negativo",
                field="product_value",
            )

    @property
    def pode_ser_editada(self) -> bool:
        return self.status == DeclarationStatus.PENDING

    def garantir_editavel(self, operacao: str = "alterada") -> None:
        """
        Raises:
            BusinessRuleViolationError: Se a declaração já foi revisada
        """
        if not self.pode_ser_editada:
            raise BusinessRuleViolationError(
                f"Declaração {self.declaration_number} com status "
                f"{self.status.value} não pode ser {operacao}",
                rule="DECLARATION_NOT_PENDING",
            )

    def atualizar_dados(
        self,
        declaration_type: str,
        product_description: str,
        tnved_code: Optional[str] = None,
        product_value: Optional[Decimal] = None,
        net_weight: Optional[Decimal] = None,
        quantity: Optional[int] = None,
        country_of_origin: Optional[str] = None,
        country_of_destination: Optional[str] = None,
        customs_office: Optional[str] = None,
    ) -> None:
        """Substitui os campos mutáveis; só permitido enquanto PENDING."""
        self.garantir_editavel("alterada")
        self.validar_campos(declaration_type, product_description, product_value)

        self.declaration_type = declaration_type.strip()
        self.product_description = product_description.strip()
        self.tnved_code = tnved_code
        self.product_value = product_value if product_value is not None else ZERO
        self.net_weight = net_weight if net_weight is not None else ZERO
        self.quantity = quantity if quantity is not None else 0
        self.country_of_origin = country_of_origin
        self.country_of_destination = country_of_destination
        self.customs_office = customs_office

    def revisar(self, novo_status: DeclarationStatus, agora: Optional[datetime] = None) -> None:
        """
        Aprova ou rejeita a declaração.

        Raises:
            BusinessRuleViolationError: Se transição não permitida
        """
        if novo_status == DeclarationStatus.PENDING:
            raise BusinessRuleViolationError(
                "Declaração não pode voltar para PENDING",
                rule="INVALID_STATUS_TRANSITION",
            )
        if self.status.is_terminal:
            raise BusinessRuleViolationError(
                f"Declaração {self.declaration_number} já foi revisada "
                f"({self.status.value})",
                rule="INVALID_STATUS_TRANSITION",
            )

        self.status = novo_status
        self.reviewed_at = agora or datetime.now(timezone.utc)
