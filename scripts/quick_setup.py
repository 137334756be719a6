#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings (SQLite)
2. Executa migrations
3. Carrega UNPs de exemplo
4. Cria dados de exemplo via use cases (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

SAMPLE_UNPS = ['100000001', '100000002', '100000003']


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Executa migrations e carrega UNPs de exemplo."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    call_command('load_unp', *SAMPLE_UNPS)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cria cliente, motorista, veículo, atividade e declaração de exemplo."""
    from src.config.container import get_container
    from src.core.users.dtos import RegistrarUsuarioInputDTO
    from src.core.vehicles.dtos import VeiculoInputDTO
    from src.core.activities.dtos import CriarAtividadeInputDTO
    from src.core.declarations.dtos import DeclaracaoInputDTO
    from src.core.shared.exceptions import DomainException

    container = get_container()

    print("📝 Criando dados de exemplo...")
    try:
        client = container.registrar_usuario_service().execute(RegistrarUsuarioInputDTO(
            username='acme', password='acme-pass', role='CLIENT',
            name='ACME Logística', unp=SAMPLE_UNPS[0], email='contato@acme.example',
        ))
        container.registrar_usuario_service().execute(RegistrarUsuarioInputDTO(
            username='motorista1', password='driver-pass', role='DRIVER',
        ))
    except DomainException as e:
        print(f"   ⚠ Dados de exemplo já existem: {e}")
        return

    container.criar_veiculo_service().execute(VeiculoInputDTO(
        license_plate='AA1234BB', client_id=client.id, model='Volvo FH',
        vehicle_type='Truck', year_of_manufacture=2019, capacity=20000,
    ))
    container.criar_atividade_service().execute(CriarAtividadeInputDTO(
        user_id=client.id, description='Cadastro inicial da frota',
    ))
    declaration = container.criar_declaracao_service().execute(DeclaracaoInputDTO.from_dict({
        'client_id': client.id, 'declaration_type': 'IMPORT',
        'product_description': 'Peças automotivas', 'product_value': '15000.00',
    }))
    print(f"   ✓ Cliente {client.username}, declaração {declaration.declaration_number}")
    print("✅ Dados de exemplo criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from src.adapters.django_app.shared.database import check_database_connection

    print("🔍 Verificando conexão com o banco...")
    result = check_database_connection()
    if result['healthy']:
        print("✅ Conexão OK!")
    else:
        print(f"❌ Erro de conexão: {result['error']}")
    return result['healthy']


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/admin/")
    print("   3. Acesse: http://localhost:8000/api/users/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar dados de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Back Office Aduaneiro - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
