"""
Configurações globais do Pytest para o back office aduaneiro.

Este arquivo:
- Configura Django settings para testes (SQLite em memória)
- Fornece fixtures de repositórios em memória, UoW e relógio fixo
- Fornece fixtures de usuários já cadastrados
"""

from datetime import datetime, timezone

import pytest


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            ALLOWED_HOSTS=['testserver', 'localhost'],
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.customs',
            ],
            MIDDLEWARE=[
                'django.middleware.common.CommonMiddleware',
            ],
            TEMPLATES=[{
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'DIRS': [],
                'APP_DIRS': True,
                'OPTIONS': {
                    'context_processors': [
                        'django.template.context_processors.request',
                        'django.contrib.auth.context_processors.auth',
                        'django.contrib.messages.context_processors.messages',
                    ],
                },
            }],
            ROOT_URLCONF='src.config.urls',
            PASSWORD_HASHERS=['django.contrib.auth.hashers.MD5PasswordHasher'],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='UTC',
            DECLARATION_NUMBER_PREFIX='TD',
        )
        django.setup()

    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


# =============================================================================
# Fakes
# =============================================================================

class FakePasswordHasher:
    """Hasher previsível para testes de use case."""

    PREFIX = "hashed::"

    def hash(self, raw_password: str) -> str:
        return self.PREFIX + raw_password

    def verify(self, raw_password: str, hashed: str) -> bool:
        return hashed == self.PREFIX + raw_password


UNPS = ["123456789", "987654321", "555555555"]

INSTANTE = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset do container global entre testes.

    Garante que cada teste inicia com estado limpo.
    """
    yield
    from src.config.container import reset_container
    reset_container()


# =============================================================================
# Core: dependências em memória
# =============================================================================

@pytest.fixture
def clock():
    """Relógio congelado em 2024-05-10 12:00 UTC."""
    from src.core.shared.interfaces import FixedClock
    return FixedClock(INSTANTE)


@pytest.fixture
def uow():
    """Unit of Work em memória."""
    from src.adapters.django_app.shared.unit_of_work import InMemoryUnitOfWork
    return InMemoryUnitOfWork()


@pytest.fixture
def password_hasher():
    return FakePasswordHasher()


@pytest.fixture
def user_repo():
    from src.core.users.ports import InMemoryUserRepository
    return InMemoryUserRepository()


@pytest.fixture
def unp_repo():
    """Tabela de UNP com três registros."""
    from src.core.users.ports import InMemoryUnpRepository
    return InMemoryUnpRepository(UNPS)


@pytest.fixture
def vehicle_repo():
    from src.core.vehicles.ports import InMemoryVehicleRepository
    return InMemoryVehicleRepository()


@pytest.fixture
def activity_repo():
    from src.core.activities.ports import InMemoryActivityRepository
    return InMemoryActivityRepository()


@pytest.fixture
def declaration_repo():
    from src.core.declarations.ports import InMemoryDeclarationRepository
    return InMemoryDeclarationRepository()


@pytest.fixture
def registrar_service(user_repo, unp_repo, password_hasher, uow, clock):
    from src.core.users.use_cases import RegistrarUsuarioService
    from src.core.users.verification import UnpVerificationService
    return RegistrarUsuarioService(
        user_repo, unp_repo, password_hasher, UnpVerificationService(), uow, clock
    )


@pytest.fixture
def cliente(registrar_service):
    """Cliente cadastrado com o UNP 123456789."""
    from src.core.users.dtos import RegistrarUsuarioInputDTO
    return registrar_service.execute(RegistrarUsuarioInputDTO(
        username="acme",
        password="s3cret",
        role="CLIENT",
        name="ACME Logística",
        unp=UNPS[0],
        email="contato@acme.example",
    ))


@pytest.fixture
def motorista(registrar_service):
    """Motorista cadastrado."""
    from src.core.users.dtos import RegistrarUsuarioInputDTO
    return registrar_service.execute(RegistrarUsuarioInputDTO(
        username="joao",
        password="driver-pass",
        role="DRIVER",
    ))
