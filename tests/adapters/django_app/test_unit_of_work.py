"""
Testes do DjangoUnitOfWork.

Dentro do teste o pytest-django já abriu uma transação; o UoW
trabalha como savepoint, o que permite verificar commit e rollback.
"""

import pytest

from src.adapters.django_app.customs.models import UnpModel
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork

pytestmark = pytest.mark.django_db


def test_commit_persiste():
    uow = DjangoUnitOfWork()

    with uow:
        UnpModel.objects.create(unp="111111111")

    assert uow.is_committed is True
    assert UnpModel.objects.filter(unp="111111111").exists()


def test_excecao_faz_rollback():
    uow = DjangoUnitOfWork()

    with pytest.raises(RuntimeError):
        with uow:
            UnpModel.objects.create(unp="222222222")
            raise RuntimeError("falha no meio da operação")

    assert uow.is_rolled_back is True
    assert not UnpModel.objects.filter(unp="222222222").exists()


def test_rollback_preserva_dados_anteriores():
    UnpModel.objects.create(unp="333333333")

    with pytest.raises(RuntimeError):
        with DjangoUnitOfWork():
            UnpModel.objects.filter(unp="333333333").delete()
            raise RuntimeError("abortar")

    assert UnpModel.objects.filter(unp="333333333").exists()


def test_reutilizavel():
    uow = DjangoUnitOfWork()

    with uow:
        UnpModel.objects.create(unp="444444444")
    with uow:
        UnpModel.objects.create(unp="555555555")

    assert UnpModel.objects.count() == 2


def test_remocao_em_cascata_pelo_use_case(unp_factory):
    """Remover usuário apaga dependentes na mesma transação."""
    from src.config.container import get_container
    from src.core.users.dtos import RegistrarUsuarioInputDTO
    from src.core.vehicles.dtos import VeiculoInputDTO

    unp_factory("123456789")
    container = get_container()
    cliente = container.registrar_usuario_service().execute(RegistrarUsuarioInputDTO(
        username="acme", password="pw", role="CLIENT", name="ACME", unp="123456789",
    ))
    container.criar_veiculo_service().execute(
        VeiculoInputDTO(license_plate="AA1234BB", client_id=cliente.id)
    )

    container.remover_usuario_service().execute(cliente.id)

    from src.adapters.django_app.customs.models import UserModel, VehicleModel
    assert not UserModel.objects.filter(id=cliente.id).exists()
    assert VehicleModel.objects.count() == 0
    assert UnpModel.objects.filter(unp="123456789").exists()
