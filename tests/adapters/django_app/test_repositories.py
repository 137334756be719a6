"""
Testes dos repositórios Django (ORM real, SQLite em memória).

Coverage:
- Mapeamento Entity ↔ Model (incluindo UNP e Decimal)
- Unicidade e tamanho de coluna convertidos em ValidationError
- Consultas de atividades por período e paginação
- Sequência de numeração de declarações
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import DataError

from src.adapters.django_app.customs.models import SequenceModel, UnpModel, VehicleModel
from src.adapters.django_app.customs.repositories import DjangoUnpRepository
from src.core.activities.entities import ActivityEntity
from src.core.declarations.entities import DeclarationEntity, DeclarationStatus
from src.core.shared.exceptions import ValidationError
from src.core.users.entities import UserEntity, UserRole
from src.core.vehicles.entities import VehicleEntity

pytestmark = pytest.mark.django_db

BASE = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


class TestUnpRepository:

    def test_get_by_value(self, unp_factory):
        unp_factory("555555555", "Transportes Sul")
        repo = DjangoUnpRepository()

        unp = repo.get_by_value("555555555")

        assert unp.company_name == "Transportes Sul"
        assert unp.id is not None
        assert repo.get_by_value("000000000") is None
        assert repo.exists("555555555") is True


class TestUserRepository:

    def test_salvar_e_recuperar_com_unp(self, django_user_repo, usuario_persistido):
        user = django_user_repo.get_by_id(usuario_persistido.id)

        assert user.username == "acme"
        assert user.role == UserRole.CLIENT
        assert user.unp.unp == "123456789"
        assert user.unp.company_name == "ACME Ltda"

    def test_consultas_por_username_e_unp(self, django_user_repo, usuario_persistido):
        assert django_user_repo.get_by_username("acme").id == usuario_persistido.id
        assert django_user_repo.get_by_username("outro") is None
        assert django_user_repo.exists_by_username("acme") is True
        assert django_user_repo.exists_by_unp("123456789") is True

    def test_listar_por_papel(self, django_user_repo, usuario_persistido):
        django_user_repo.save(UserEntity(username="joao", password="h", role=UserRole.DRIVER))

        drivers = django_user_repo.list_by_role(UserRole.DRIVER)

        assert [u.username for u in drivers] == ["joao"]
        assert django_user_repo.count() == 2

    def test_username_duplicado_vira_validation_error(self, django_user_repo, usuario_persistido):
        with pytest.raises(ValidationError):
            django_user_repo.save(UserEntity(username="acme", password="h", role=UserRole.DRIVER))

    def test_unp_vinculado_a_um_usuario_apenas(self, django_user_repo, usuario_persistido):
        from src.core.users.entities import UnpEntity

        with pytest.raises(ValidationError):
            django_user_repo.save(UserEntity(
                username="copia", password="h", role=UserRole.CLIENT,
                unp=UnpEntity(unp="123456789"),
            ))

    def test_atualizar_existente(self, django_user_repo, usuario_persistido):
        usuario_persistido.atualizar_dados(email="novo@acme.example")
        django_user_repo.save(usuario_persistido)

        assert django_user_repo.get_by_id(usuario_persistido.id).email == "novo@acme.example"
        assert django_user_repo.count() == 1


class TestVehicleRepository:

    def test_placa_unica(self, django_vehicle_repo, usuario_persistido):
        django_vehicle_repo.save(VehicleEntity.criar("AA1234BB", usuario_persistido.id))

        with pytest.raises(ValidationError):
            django_vehicle_repo.save(VehicleEntity.criar("AA1234BB", usuario_persistido.id))

    def test_valor_maior_que_a_coluna_vira_validation_error(
        self, django_vehicle_repo, usuario_persistido
    ):
        erro = DataError("value too long for type character varying(20)")

        with patch.object(VehicleModel.objects, "update_or_create", side_effect=erro):
            with pytest.raises(ValidationError):
                django_vehicle_repo.save(VehicleEntity.criar("A" * 21, usuario_persistido.id))

        assert django_vehicle_repo.count() == 0

    def test_consultas(self, django_vehicle_repo, usuario_persistido):
        django_vehicle_repo.save(VehicleEntity.criar(
            "AA1234BB", usuario_persistido.id, vehicle_type="Heavy Truck", capacity=18000.0,
        ))
        django_vehicle_repo.save(VehicleEntity.criar(
            "VV1111VV", usuario_persistido.id, vehicle_type="Van",
        ))

        assert django_vehicle_repo.get_by_license_plate("AA1234BB").capacity == 18000.0
        assert django_vehicle_repo.exists_by_license_plate("VV1111VV") is True
        assert len(django_vehicle_repo.list_by_client(usuario_persistido.id)) == 2
        assert [v.license_plate for v in django_vehicle_repo.list_by_type("truck")] == ["AA1234BB"]

    def test_delete_by_client(self, django_vehicle_repo, usuario_persistido):
        django_vehicle_repo.save(VehicleEntity.criar("AA1234BB", usuario_persistido.id))

        assert django_vehicle_repo.delete_by_client(usuario_persistido.id) == 1
        assert django_vehicle_repo.count() == 0


class TestActivityRepository:

    @pytest.fixture
    def atividades(self, django_activity_repo, usuario_persistido):
        """Cinco atividades em dias consecutivos, terminando em BASE."""
        for dias_atras in range(5):
            django_activity_repo.save(ActivityEntity.criar(
                usuario_persistido.id,
                f"Registro de despacho {dias_atras}",
                activity_date=BASE - timedelta(days=dias_atras),
            ))
        return usuario_persistido.id

    def test_ordenacao_mais_recente_primeiro(self, django_activity_repo, atividades):
        datas = [a.activity_date for a in django_activity_repo.list_by_user(atividades)]

        assert datas[0] == BASE
        assert datas == sorted(datas, reverse=True)

    def test_recentes(self, django_activity_repo, atividades):
        assert len(django_activity_repo.list_recent_by_user(atividades, 2)) == 2

    def test_paginacao(self, django_activity_repo, atividades):
        items, total = django_activity_repo.list_by_user_paginated(atividades, page=2, per_page=2)

        assert total == 5
        assert [a.activity_date for a in items] == [BASE - timedelta(days=2), BASE - timedelta(days=3)]

    def test_periodo_inclusivo(self, django_activity_repo, atividades):
        inicio, fim = BASE - timedelta(days=2), BASE

        assert len(django_activity_repo.list_between(inicio, fim)) == 3
        assert len(django_activity_repo.list_by_user_between(atividades, inicio, fim)) == 3

    def test_contagem_semiaberta(self, django_activity_repo, atividades):
        assert django_activity_repo.count_by_user_between(
            atividades, BASE - timedelta(days=1), BASE,
        ) == 1
        assert django_activity_repo.count_by_user(atividades) == 5

    def test_busca_case_insensitive(self, django_activity_repo, atividades):
        assert len(django_activity_repo.search_by_user(atividades, "DESPACHO")) == 5

    def test_delete_by_user(self, django_activity_repo, atividades):
        assert django_activity_repo.delete_by_user(atividades) == 5


class TestDeclarationRepository:

    def test_salvar_preserva_decimais(self, django_declaration_repo, usuario_persistido):
        declaration = DeclarationEntity.criar(
            "TD-2024-00001", usuario_persistido.id, "IMPORT", "Peças",
            product_value=Decimal("1500.75"), net_weight=Decimal("12.5"), quantity=3,
        )
        django_declaration_repo.save(declaration)

        loaded = django_declaration_repo.get_by_id(declaration.id)

        assert loaded.product_value == Decimal("1500.75")
        assert loaded.net_weight == Decimal("12.5")
        assert loaded.status == DeclarationStatus.PENDING

    def test_contagem_por_status(self, django_declaration_repo, usuario_persistido):
        pendente = DeclarationEntity.criar("TD-2024-00001", usuario_persistido.id, "IMPORT", "A")
        aprovada = DeclarationEntity.criar("TD-2024-00002", usuario_persistido.id, "IMPORT", "B")
        aprovada.revisar(DeclarationStatus.APPROVED, BASE)
        django_declaration_repo.save(pendente)
        django_declaration_repo.save(aprovada)

        assert django_declaration_repo.count_by_client(usuario_persistido.id) == 2
        assert django_declaration_repo.count_by_client_and_status(
            usuario_persistido.id, DeclarationStatus.APPROVED,
        ) == 1
        assert [d.id for d in django_declaration_repo.list_by_status(DeclarationStatus.PENDING)] == [
            pendente.id
        ]

    def test_sequencia_incrementa(self, django_declaration_repo):
        assert django_declaration_repo.next_sequence() == 1
        assert django_declaration_repo.next_sequence() == 2
        assert SequenceModel.objects.get(name="declaration_number").value == 2

    def test_sequencia_parte_das_existentes(self, django_declaration_repo, usuario_persistido):
        django_declaration_repo.save(
            DeclarationEntity.criar("TD-2024-00001", usuario_persistido.id, "IMPORT", "A")
        )

        assert django_declaration_repo.next_sequence() == 2

    def test_numero_duplicado_erro(self, django_declaration_repo, usuario_persistido):
        django_declaration_repo.save(
            DeclarationEntity.criar("TD-2024-00001", usuario_persistido.id, "IMPORT", "A")
        )

        with pytest.raises(ValidationError):
            django_declaration_repo.save(
                DeclarationEntity.criar("TD-2024-00001", usuario_persistido.id, "IMPORT", "B")
            )


def test_unp_protegido_contra_remocao(usuario_persistido):
    """UNP vinculado não pode ser apagado enquanto o usuário existir."""
    from django.db.models import ProtectedError

    with pytest.raises(ProtectedError):
        UnpModel.objects.get(unp="123456789").delete()
