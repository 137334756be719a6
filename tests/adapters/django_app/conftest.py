"""
Fixtures para testes com Django ORM.

Os testes que usam estas fixtures precisam do marker django_db;
as migrations do app customs são aplicadas pelo pytest-django.
"""

import pytest


@pytest.fixture
def unp_factory():
    """Factory para criar registros na tabela de UNP."""
    from src.adapters.django_app.customs.models import UnpModel

    def create_unp(unp="123456789", company_name=None):
        return UnpModel.objects.create(unp=unp, company_name=company_name)

    return create_unp


@pytest.fixture
def django_user_repo():
    from src.adapters.django_app.customs.repositories import DjangoUserRepository
    return DjangoUserRepository()


@pytest.fixture
def django_vehicle_repo():
    from src.adapters.django_app.customs.repositories import DjangoVehicleRepository
    return DjangoVehicleRepository()


@pytest.fixture
def django_activity_repo():
    from src.adapters.django_app.customs.repositories import DjangoActivityRepository
    return DjangoActivityRepository()


@pytest.fixture
def django_declaration_repo():
    from src.adapters.django_app.customs.repositories import DjangoDeclarationRepository
    return DjangoDeclarationRepository()


@pytest.fixture
def usuario_persistido(django_user_repo, unp_factory):
    """Cliente salvo no banco com UNP vinculado."""
    from src.core.users.entities import UnpEntity, UserEntity, UserRole

    unp_factory("123456789", "ACME Ltda")
    user = UserEntity(
        username="acme",
        password="hash",
        role=UserRole.CLIENT,
        name="ACME Logística",
        unp=UnpEntity(unp="123456789"),
    )
    django_user_repo.save(user)
    return user
