"""
Settings do back office aduaneiro.

Tudo que varia entre máquinas (segredo, banco, hosts, níveis de log,
prefixo das declarações) é lido do ambiente ou de um arquivo .env.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from src.adapters.django_app.shared.database import DatabaseConfig

load_dotenv()

# =============================================================================
# Projeto
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.getenv('SECRET_KEY', 'customs-dev-only-secret-key')

DEBUG = os.getenv('DEBUG', 'True').lower() in ('true', '1', 'yes')

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')
    if host.strip()
]

# =============================================================================
# Aplicações e middleware
# =============================================================================

# admin, sessions e messages existem apenas para o Django Admin
DJANGO_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

CUSTOMS_APPS = [
    'src.adapters.django_app.customs',
]

INSTALLED_APPS = DJANGO_APPS + CUSTOMS_APPS

# A API JSON é csrf_exempt; o CsrfViewMiddleware continua protegendo o admin
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'src.config.urls'
WSGI_APPLICATION = 'src.config.wsgi.application'

TEMPLATES = [
    {
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
    },
]

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# =============================================================================
# Banco de dados
# =============================================================================

# DATABASE_URL > DATABASE_ENGINE/DATABASE_* > db.sqlite3 na raiz do projeto
DATABASE_CONFIG = DatabaseConfig.from_env(default_sqlite_path=str(BASE_DIR / 'db.sqlite3'))

DATABASES = {
    'default': DATABASE_CONFIG.to_django_config(),
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# =============================================================================
# Senhas dos usuários do back office
# =============================================================================

# O primeiro hasher gera os hashes novos; os demais só verificam hashes antigos
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.PBKDF2PasswordHasher',
    'django.contrib.auth.hashers.PBKDF2SHA1PasswordHasher',
]

# =============================================================================
# Localização
# =============================================================================

# Datas gravadas e comparadas em UTC ("hoje" nas estatísticas é o dia UTC)
LANGUAGE_CODE = 'pt-br'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'customs': {
            'format': '[{asctime}] {levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'customs',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'src.core': {
            'handlers': ['console'],
            'level': os.getenv('CORE_LOG_LEVEL', 'DEBUG'),
            'propagate': False,
        },
        'src.adapters': {
            'handlers': ['console'],
            'level': os.getenv('ADAPTERS_LOG_LEVEL', 'DEBUG'),
            'propagate': False,
        },
    },
}

# =============================================================================
# Declarações
# =============================================================================

# Número da declaração: <PREFIXO>-<ano>-<sequência de 5 dígitos>
DECLARATION_NUMBER_PREFIX = os.getenv('DECLARATION_NUMBER_PREFIX', 'TD')
