"""
Migration inicial do back office aduaneiro.

Cria as tabelas:
- customs_unp: Referência de UNP
- customs_users: Usuários
- customs_vehicles: Veículos
- customs_activities: Atividades
- customs_declarations: Declarações aduaneiras
- customs_sequences: Contadores nomeados
"""

from decimal import Decimal

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: customs_unp
        # =================================================================
        migrations.CreateModel(
            name='UnpModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('unp', models.CharField(
                    max_length=9,
                    unique=True,
                    help_text='UNP de 9 dígitos'
                )),
                ('company_name', models.CharField(
                    max_length=255,
                    null=True,
                    blank=True,
                    help_text='Razão social registrada'
                )),
            ],
            options={
                'db_table': 'customs_unp',
                'verbose_name': 'UNP',
                'verbose_name_plural': 'UNPs',
                'ordering': ['unp'],
            },
        ),

        # =================================================================
        # Tabela: customs_users
        # =================================================================
        migrations.CreateModel(
            name='UserModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do usuário'
                )),
                ('username', models.CharField(
                    max_length=150,
                    unique=True,
                    help_text='Login único'
                )),
                ('password', models.CharField(
                    max_length=255,
                    help_text='Hash da senha'
                )),
                ('role', models.CharField(
                    max_length=10,
                    choices=[
                        ('CLIENT', 'Cliente'),
                        ('DRIVER', 'Motorista'),
                        ('ADMIN', 'Administrador'),
                    ],
                    db_index=True,
                    help_text='Papel do usuário'
                )),
                ('name', models.CharField(
                    max_length=255,
                    null=True,
                    blank=True,
                    help_text='Nome da empresa (clientes)'
                )),
                ('email', models.CharField(
                    max_length=254,
                    null=True,
                    blank=True,
                    help_text='E-mail de contato'
                )),
                ('activity_type', models.CharField(
                    max_length=255,
                    null=True,
                    blank=True,
                    help_text='Ramo de atividade'
                )),
                ('unp', models.OneToOneField(
                    null=True,
                    blank=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='user',
                    to='customs.unpmodel',
                    help_text='UNP vinculado (clientes)'
                )),
                ('verified', models.BooleanField(
                    default=True,
                    help_text='UNP verificado'
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de cadastro'
                )),
            ],
            options={
                'db_table': 'customs_users',
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
                'ordering': ['username'],
            },
        ),

        # =================================================================
        # Tabela: customs_vehicles
        # =================================================================
        migrations.CreateModel(
            name='VehicleModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do veículo'
                )),
                ('license_plate', models.CharField(
                    max_length=20,
                    unique=True,
                    help_text='Placa (única)'
                )),
                ('model', models.CharField(
                    max_length=100,
                    null=True,
                    blank=True,
                    help_text='Modelo'
                )),
                ('vehicle_type', models.CharField(
                    max_length=50,
                    null=True,
                    blank=True,
                    db_index=True,
                    help_text='Tipo do veículo'
                )),
                ('year_of_manufacture', models.IntegerField(
                    null=True,
                    blank=True,
                    help_text='Ano de fabricação'
                )),
                ('capacity', models.FloatField(
                    null=True,
                    blank=True,
                    help_text='Capacidade de carga'
                )),
                ('client', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='vehicles',
                    to='customs.usermodel',
                    help_text='Cliente proprietário'
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de cadastro'
                )),
                ('updated_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora da última alteração'
                )),
            ],
            options={
                'db_table': 'customs_vehicles',
                'verbose_name': 'Veículo',
                'verbose_name_plural': 'Veículos',
                'ordering': ['-created_at'],
            },
        ),

        # =================================================================
        # Tabela: customs_activities
        # =================================================================
        migrations.CreateModel(
            name='ActivityModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da atividade'
                )),
                ('user', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='activities',
                    to='customs.usermodel',
                    help_text='Usuário dono da atividade'
                )),
                ('description', models.TextField(
                    help_text='Descrição da atividade'
                )),
                ('activity_date', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                    help_text='Data/hora da atividade'
                )),
            ],
            options={
                'db_table': 'customs_activities',
                'verbose_name': 'Atividade',
                'verbose_name_plural': 'Atividades',
                'ordering': ['-activity_date'],
                'indexes': [
                    models.Index(fields=['user', 'activity_date'], name='activity_user_date_idx'),
                ],
            },
        ),

        # =================================================================
        # Tabela: customs_declarations
        # =================================================================
        migrations.CreateModel(
            name='DeclarationModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da declaração'
                )),
                ('declaration_number', models.CharField(
                    max_length=32,
                    unique=True,
                    help_text='Número TD-<ano>-<sequência>'
                )),
                ('client', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='declarations',
                    to='customs.usermodel',
                    help_text='Cliente declarante'
                )),
                ('declaration_type', models.CharField(
                    max_length=50,
                    help_text='Tipo de declaração'
                )),
                ('tnved_code', models.CharField(
                    max_length=20,
                    null=True,
                    blank=True,
                    help_text='Código TN VED'
                )),
                ('product_description', models.TextField(
                    help_text='Descrição da mercadoria'
                )),
                ('product_value', models.DecimalField(
                    max_digits=15,
                    decimal_places=2,
                    default=Decimal('0'),
                    help_text='Valor declarado'
                )),
                ('net_weight', models.DecimalField(
                    max_digits=12,
                    decimal_places=3,
                    default=Decimal('0'),
                    help_text='Peso líquido'
                )),
                ('quantity', models.IntegerField(
                    default=0,
                    help_text='Quantidade'
                )),
                ('country_of_origin', models.CharField(max_length=100, null=True, blank=True)),
                ('country_of_destination', models.CharField(max_length=100, null=True, blank=True)),
                ('customs_office', models.CharField(max_length=100, null=True, blank=True)),
                ('status', models.CharField(
                    max_length=10,
                    choices=[
                        ('PENDING', 'Pendente'),
                        ('APPROVED', 'Aprovada'),
                        ('REJECTED', 'Rejeitada'),
                    ],
                    default='PENDING',
                    db_index=True,
                    help_text='Estado da declaração'
                )),
                ('submitted_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Data/hora de envio'
                )),
                ('reviewed_at', models.DateTimeField(
                    null=True,
                    blank=True,
                    help_text='Data/hora da revisão'
                )),
            ],
            options={
                'db_table': 'customs_declarations',
                'verbose_name': 'Declaração',
                'verbose_name_plural': 'Declarações',
                'ordering': ['-submitted_at'],
                'indexes': [
                    models.Index(fields=['client', 'status'], name='declaration_client_status_idx'),
                ],
            },
        ),

        # =================================================================
        # Tabela: customs_sequences
        # =================================================================
        migrations.CreateModel(
            name='SequenceModel',
            fields=[
                ('name', models.CharField(
                    max_length=50,
                    primary_key=True,
                    serialize=False,
                    help_text='Nome da sequência'
                )),
                ('value', models.BigIntegerField(
                    default=0,
                    help_text='Último valor emitido'
                )),
            ],
            options={
                'db_table': 'customs_sequences',
                'verbose_name': 'Sequência',
                'verbose_name_plural': 'Sequências',
            },
        ),
    ]
