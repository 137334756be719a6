"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, hasher, clock)
- Factory: Nova instância por chamada (services, UoW)
- Configuration: valores vindos de django.conf.settings

Os imports de adapters e use cases são lazy para que o container
possa ser importado antes de o Django estar configurado.
"""

from typing import Optional

from dependency_injector import containers, providers


def _lazy(module_path: str, name: str):
    """
    Retorna callable que importa `module_path.name` sob demanda
    e o instancia com os argumentos recebidos.
    """
    def factory(*args, **kwargs):
        return getattr(__import__(module_path, fromlist=[name]), name)(*args, **kwargs)

    factory.__name__ = name
    factory.__qualname__ = name
    return factory


_USERS = 'src.core.users.use_cases'
_VEHICLES = 'src.core.vehicles.use_cases'
_ACTIVITIES = 'src.core.activities.use_cases'
_DECLARATIONS = 'src.core.declarations.use_cases'
_REPOSITORIES = 'src.adapters.django_app.customs.repositories'


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: settings do Django
    - Infrastructure: hasher de senha, relógio, verificador de UNP
    - Repositories: Persistência
    - Unit of Work: Transações
    - Services: Use Cases

    Example:
        container = Container()
        service = container.criar_veiculo_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    password_hasher = providers.Singleton(
        _lazy('src.adapters.django_app.shared.security', 'DjangoPasswordHasher')
    )

    clock = providers.Singleton(
        _lazy('src.adapters.django_app.shared.security', 'DjangoClock')
    )

    unp_verifier = providers.Singleton(
        _lazy('src.core.users.verification', 'UnpVerificationService')
    )

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    unp_repository = providers.Singleton(_lazy(_REPOSITORIES, 'DjangoUnpRepository'))
    user_repository = providers.Singleton(_lazy(_REPOSITORIES, 'DjangoUserRepository'))
    vehicle_repository = providers.Singleton(_lazy(_REPOSITORIES, 'DjangoVehicleRepository'))
    activity_repository = providers.Singleton(_lazy(_REPOSITORIES, 'DjangoActivityRepository'))
    declaration_repository = providers.Singleton(
        _lazy(_REPOSITORIES, 'DjangoDeclarationRepository')
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        _lazy('src.adapters.django_app.shared.unit_of_work', 'DjangoUnitOfWork')
    )

    # =========================================================================
    # Services - Usuários
    # =========================================================================

    registrar_usuario_service = providers.Factory(
        _lazy(_USERS, 'RegistrarUsuarioService'),
        user_repo=user_repository,
        unp_repo=unp_repository,
        password_hasher=password_hasher,
        unp_verifier=unp_verifier,
        uow=unit_of_work,
        clock=clock,
    )

    obter_usuario_service = providers.Factory(
        _lazy(_USERS, 'ObterUsuarioService'),
        user_repo=user_repository,
    )

    obter_usuario_por_username_service = providers.Factory(
        _lazy(_USERS, 'ObterUsuarioPorUsernameService'),
        user_repo=user_repository,
    )

    listar_usuarios_service = providers.Factory(
        _lazy(_USERS, 'ListarUsuariosService'),
        user_repo=user_repository,
    )

    atualizar_usuario_service = providers.Factory(
        _lazy(_USERS, 'AtualizarUsuarioService'),
        user_repo=user_repository,
        uow=unit_of_work,
    )

    remover_usuario_service = providers.Factory(
        _lazy(_USERS, 'RemoverUsuarioService'),
        user_repo=user_repository,
        vehicle_repo=vehicle_repository,
        activity_repo=activity_repository,
        declaration_repo=declaration_repository,
        uow=unit_of_work,
    )

    verificar_username_service = providers.Factory(
        _lazy(_USERS, 'VerificarUsernameService'),
        user_repo=user_repository,
    )

    # =========================================================================
    # Services - Veículos
    # =========================================================================

    criar_veiculo_service = providers.Factory(
        _lazy(_VEHICLES, 'CriarVeiculoService'),
        vehicle_repo=vehicle_repository,
        user_repo=user_repository,
        uow=unit_of_work,
        clock=clock,
    )

    obter_veiculo_service = providers.Factory(
        _lazy(_VEHICLES, 'ObterVeiculoService'),
        vehicle_repo=vehicle_repository,
        user_repo=user_repository,
    )

    obter_veiculo_por_placa_service = providers.Factory(
        _lazy(_VEHICLES, 'ObterVeiculoPorPlacaService'),
        vehicle_repo=vehicle_repository,
        user_repo=user_repository,
    )

    listar_veiculos_service = providers.Factory(
        _lazy(_VEHICLES, 'ListarVeiculosService'),
        vehicle_repo=vehicle_repository,
        user_repo=user_repository,
    )

    atualizar_veiculo_service = providers.Factory(
        _lazy(_VEHICLES, 'AtualizarVeiculoService'),
        vehicle_repo=vehicle_repository,
        user_repo=user_repository,
        uow=unit_of_work,
        clock=clock,
    )

    remover_veiculo_service = providers.Factory(
        _lazy(_VEHICLES, 'RemoverVeiculoService'),
        vehicle_repo=vehicle_repository,
        uow=unit_of_work,
    )

    verificar_placa_service = providers.Factory(
        _lazy(_VEHICLES, 'VerificarPlacaService'),
        vehicle_repo=vehicle_repository,
    )

    estatisticas_veiculos_service = providers.Factory(
        _lazy(_VEHICLES, 'EstatisticasVeiculosClienteService'),
        vehicle_repo=vehicle_repository,
        user_repo=user_repository,
    )

    # =========================================================================
    # Services - Atividades
    # =========================================================================

    criar_atividade_service = providers.Factory(
        _lazy(_ACTIVITIES, 'CriarAtividadeService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
        uow=unit_of_work,
        clock=clock,
    )

    criar_atividade_username_service = providers.Factory(
        _lazy(_ACTIVITIES, 'CriarAtividadeParaUsernameService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
        uow=unit_of_work,
        clock=clock,
    )

    obter_atividade_service = providers.Factory(
        _lazy(_ACTIVITIES, 'ObterAtividadeService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
    )

    listar_atividades_service = providers.Factory(
        _lazy(_ACTIVITIES, 'ListarAtividadesService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
    )

    listar_atividades_recentes_service = providers.Factory(
        _lazy(_ACTIVITIES, 'ListarAtividadesRecentesService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
    )

    listar_atividades_paginadas_service = providers.Factory(
        _lazy(_ACTIVITIES, 'ListarAtividadesPaginadasService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
    )

    listar_atividades_periodo_service = providers.Factory(
        _lazy(_ACTIVITIES, 'ListarAtividadesPorPeriodoService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
    )

    buscar_atividades_service = providers.Factory(
        _lazy(_ACTIVITIES, 'BuscarAtividadesService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
    )

    atualizar_atividade_service = providers.Factory(
        _lazy(_ACTIVITIES, 'AtualizarAtividadeService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
        uow=unit_of_work,
    )

    remover_atividade_service = providers.Factory(
        _lazy(_ACTIVITIES, 'RemoverAtividadeService'),
        activity_repo=activity_repository,
        uow=unit_of_work,
    )

    remover_atividades_usuario_service = providers.Factory(
        _lazy(_ACTIVITIES, 'RemoverAtividadesUsuarioService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
        uow=unit_of_work,
    )

    estatisticas_atividades_service = providers.Factory(
        _lazy(_ACTIVITIES, 'EstatisticasAtividadesUsuarioService'),
        activity_repo=activity_repository,
        user_repo=user_repository,
        clock=clock,
    )

    # =========================================================================
    # Services - Declarações
    # =========================================================================

    criar_declaracao_service = providers.Factory(
        _lazy(_DECLARATIONS, 'CriarDeclaracaoService'),
        declaration_repo=declaration_repository,
        user_repo=user_repository,
        uow=unit_of_work,
        clock=clock,
        number_prefix=config.declaration_number_prefix,
    )

    obter_declaracao_service = providers.Factory(
        _lazy(_DECLARATIONS, 'ObterDeclaracaoService'),
        declaration_repo=declaration_repository,
        user_repo=user_repository,
    )

    listar_declaracoes_service = providers.Factory(
        _lazy(_DECLARATIONS, 'ListarDeclaracoesService'),
        declaration_repo=declaration_repository,
        user_repo=user_repository,
    )

    atualizar_declaracao_service = providers.Factory(
        _lazy(_DECLARATIONS, 'AtualizarDeclaracaoService'),
        declaration_repo=declaration_repository,
        user_repo=user_repository,
        uow=unit_of_work,
    )

    alterar_status_declaracao_service = providers.Factory(
        _lazy(_DECLARATIONS, 'AlterarStatusDeclaracaoService'),
        declaration_repo=declaration_repository,
        user_repo=user_repository,
        uow=unit_of_work,
        clock=clock,
    )

    remover_declaracao_service = providers.Factory(
        _lazy(_DECLARATIONS, 'RemoverDeclaracaoService'),
        declaration_repo=declaration_repository,
        uow=unit_of_work,
    )

    estatisticas_declaracoes_service = providers.Factory(
        _lazy(_DECLARATIONS, 'EstatisticasDeclaracoesClienteService'),
        declaration_repo=declaration_repository,
        user_repo=user_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), lendo a
    configuração de django.conf.settings.
    """
    global _container

    if _container is None:
        from django.conf import settings

        _container = Container()
        _container.config.from_dict({
            'declaration_number_prefix': getattr(settings, 'DECLARATION_NUMBER_PREFIX', 'TD'),
        })

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo.
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

def build_testing_container() -> Container:
    """
    Container com implementações InMemory.

    Repositórios em memória, UoW em memória e relógio fixo
    injetável; hasher de senha continua sendo o do Django.

    Example:
        container = build_testing_container()
        container.unp_repository().add(UnpEntity(unp="123456789"))
        container.registrar_usuario_service().execute(dto)
    """
    container = Container()
    container.config.from_dict({'declaration_number_prefix': 'TD'})

    container.unp_repository.override(
        providers.Singleton(_lazy('src.core.users.ports', 'InMemoryUnpRepository'))
    )
    container.user_repository.override(
        providers.Singleton(_lazy('src.core.users.ports', 'InMemoryUserRepository'))
    )
    container.vehicle_repository.override(
        providers.Singleton(_lazy('src.core.vehicles.ports', 'InMemoryVehicleRepository'))
    )
    container.activity_repository.override(
        providers.Singleton(_lazy('src.core.activities.ports', 'InMemoryActivityRepository'))
    )
    container.declaration_repository.override(
        providers.Singleton(_lazy('src.core.declarations.ports', 'InMemoryDeclarationRepository'))
    )
    container.unit_of_work.override(
        providers.Factory(_lazy('src.adapters.django_app.shared.unit_of_work', 'InMemoryUnitOfWork'))
    )
    container.clock.override(
        providers.Singleton(_lazy('src.core.shared.interfaces', 'SystemClock'))
    )
    return container
