"""
Django Models do back office aduaneiro.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/*/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Relacionamentos são FKs explícitas com on_delete=PROTECT;
  a remoção em cascata é feita pelo use case, não pelo banco
- Models são mapeados para/de Entities via Mappers

Tabelas:
- customs_unp: Referência de UNP (somente leitura para a aplicação)
- customs_users: Usuários (clientes, motoristas, administradores)
- customs_vehicles: Veículos
- customs_activities: Atividades
- customs_declarations: Declarações aduaneiras
- customs_sequences: Contadores serializados (numeração de declarações)
"""

from decimal import Decimal

from django.db import models
from django.utils import timezone


class UserRoleChoices(models.TextChoices):
    """Choices de papel (espelha UserRole do Core)."""
    CLIENT = 'CLIENT', 'Cliente'
    DRIVER = 'DRIVER', 'Motorista'
    ADMIN = 'ADMIN', 'Administrador'


class DeclarationStatusChoices(models.TextChoices):
    """Choices de status (espelha DeclarationStatus do Core)."""
    PENDING = 'PENDING', 'Pendente'
    APPROVED = 'APPROVED', 'Aprovada'
    REJECTED = 'REJECTED', 'Rejeitada'


class UnpModel(models.Model):
    """
    Tabela de referência de UNP.

    Mantida via Django Admin ou `manage.py load_unp`.
    """

    id = models.BigAutoField(primary_key=True)

    unp = models.CharField(
        max_length=9,
        unique=True,
        help_text="UNP de 9 dígitos"
    )

    company_name = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Razão social registrada"
    )

    class Meta:
        db_table = 'customs_unp'
        verbose_name = 'UNP'
        verbose_name_plural = 'UNPs'
        ordering = ['unp']

    def __str__(self):
        return self.unp


class UserModel(models.Model):
    """
    Usuário do back office.

    O vínculo com UNP é OneToOne: um UNP pertence a no máximo
    um usuário.
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do usuário"
    )

    username = models.CharField(
        max_length=150,
        unique=True,
        help_text="Login único"
    )

    password = models.CharField(
        max_length=255,
        help_text="Hash da senha"
    )

    role = models.CharField(
        max_length=10,
        choices=UserRoleChoices.choices,
        db_index=True,
        help_text="Papel do usuário"
    )

    name = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Nome da empresa (clientes)"
    )

    email = models.CharField(
        max_length=254,
        null=True,
        blank=True,
        help_text="E-mail de contato"
    )

    activity_type = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Ramo de atividade"
    )

    unp = models.OneToOneField(
        UnpModel,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='user',
        help_text="UNP vinculado (clientes)"
    )

    verified = models.BooleanField(
        default=True,
        help_text="UNP verificado"
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de cadastro"
    )

    class Meta:
        db_table = 'customs_users'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['username']

    def __str__(self):
        return f"{self.username} ({self.role})"


class VehicleModel(models.Model):
    """Veículo de um cliente."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do veículo"
    )

    license_plate = models.CharField(
        max_length=20,
        unique=True,
        help_text="Placa (única)"
    )

    model = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Modelo"
    )

    vehicle_type = models.CharField(
        max_length=50,
        null=True,
        blank=True,
        db_index=True,
        help_text="Tipo do veículo"
    )

    year_of_manufacture = models.IntegerField(
        null=True,
        blank=True,
        help_text="Ano de fabricação"
    )

    capacity = models.FloatField(
        null=True,
        blank=True,
        help_text="Capacidade de carga"
    )

    client = models.ForeignKey(
        UserModel,
        on_delete=models.PROTECT,
        related_name='vehicles',
        help_text="Cliente proprietário"
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de cadastro"
    )

    updated_at = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora da última alteração"
    )

    class Meta:
        db_table = 'customs_vehicles'
        verbose_name = 'Veículo'
        verbose_name_plural = 'Veículos'
        ordering = ['-created_at']

    def __str__(self):
        return self.license_plate


class ActivityModel(models.Model):
    """Atividade registrada por um usuário."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da atividade"
    )

    user = models.ForeignKey(
        UserModel,
        on_delete=models.PROTECT,
        related_name='activities',
        help_text="Usuário dono da atividade"
    )

    description = models.TextField(
        help_text="Descrição da atividade"
    )

    activity_date = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Data/hora da atividade"
    )

    class Meta:
        db_table = 'customs_activities'
        verbose_name = 'Atividade'
        verbose_name_plural = 'Atividades'
        ordering = ['-activity_date']
        indexes = [
            models.Index(fields=['user', 'activity_date'], name='activity_user_date_idx'),
        ]

    def __str__(self):
        return f"{self.user_id[:8]} @ {self.activity_date}"


class DeclarationModel(models.Model):
    """Declaração aduaneira."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da declaração"
    )

    declaration_number = models.CharField(
        max_length=32,
        unique=True,
        help_text="Número TD-<ano>-<sequência>"
    )

    client = models.ForeignKey(
        UserModel,
        on_delete=models.PROTECT,
        related_name='declarations',
        help_text="Cliente declarante"
    )

    declaration_type = models.CharField(
        max_length=50,
        help_text="Tipo de declaração"
    )

    tnved_code = models.CharField(
        max_length=20,
        null=True,
        blank=True,
        help_text="Código TN VED"
    )

    product_description = models.TextField(
        help_text="Descrição da mercadoria"
    )

    product_value = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        default=Decimal('0'),
        help_text="Valor declarado"
    )

    net_weight = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal('0'),
        help_text="Peso líquido"
    )

    quantity = models.IntegerField(
        default=0,
        help_text="Quantidade"
    )

    country_of_origin = models.CharField(max_length=100, null=True, blank=True)
    country_of_destination = models.CharField(max_length=100, null=True, blank=True)
    customs_office = models.CharField(max_length=100, null=True, blank=True)

    status = models.CharField(
        max_length=10,
        choices=DeclarationStatusChoices.choices,
        default=DeclarationStatusChoices.PENDING,
        db_index=True,
        help_text="Estado da declaração"
    )

    submitted_at = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de envio"
    )

    reviewed_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Data/hora da revisão"
    )

    class Meta:
        db_table = 'customs_declarations'
        verbose_name = 'Declaração'
        verbose_name_plural = 'Declarações'
        ordering = ['-submitted_at']
        indexes = [
            models.Index(fields=['client', 'status'], name='declaration_client_status_idx'),
        ]

    def __str__(self):
        return self.declaration_number


class SequenceModel(models.Model):
    """
    Contador nomeado.

    Lido e incrementado com select_for_update dentro da
    transação do use case.
    """

    name = models.CharField(
        max_length=50,
        primary_key=True,
        help_text="Nome da sequência"
    )

    value = models.BigIntegerField(
        default=0,
        help_text="Último valor emitido"
    )

    class Meta:
        db_table = 'customs_sequences'
        verbose_name = 'Sequência'
        verbose_name_plural = 'Sequências'

    def __str__(self):
        return f"{self.name}={self.value}"
