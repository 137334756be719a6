"""
API Views JSON do back office aduaneiro.

Endpoints (prefixo /api/):
- users/                                   GET (?role=), POST
- users/check-username/<username>/         GET
- users/username/<username>/               GET
- users/<id>/                              GET, PUT, DELETE
- vehicles/                                GET (?client_id=, ?vehicle_type=), POST
- vehicles/client/<client_id>/             GET
- vehicles/client/<client_id>/stats/       GET
- vehicles/type/<vehicle_type>/            GET
- vehicles/license-plate/<plate>/          GET
- vehicles/check-license-plate/<plate>/    GET
- vehicles/<id>/                           GET, PUT, DELETE
- activities/                              GET, POST
- activities/date-range/                   GET (?start_date, ?end_date)
- activities/user/<user_id>/               GET, DELETE
- activities/user/<user_id>/recent/        GET (?limit)
- activities/user/<user_id>/page/          GET (?page, ?per_page)
- activities/user/<user_id>/date-range/    GET
- activities/user/<user_id>/search/        GET (?keyword)
- activities/user/<user_id>/stats/         GET
- activities/username/<username>/          POST
- activities/<id>/                         GET, PUT, DELETE
- declarations/                            GET (?status=, ?client_id=), POST
- declarations/client/<client_id>/         GET
- declarations/client/<client_id>/stats/   GET
- declarations/<id>/                       GET, PUT, DELETE
- declarations/<id>/status/                PUT

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}
"""

import json
import logging
from typing import Any, Dict

from django.views import View
from django.http import JsonResponse, HttpRequest
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.users.dtos import AtualizarUsuarioInputDTO, RegistrarUsuarioInputDTO
from src.core.vehicles.dtos import VeiculoInputDTO
from src.core.activities.dtos import (
    AtualizarAtividadeInputDTO,
    CriarAtividadeInputDTO,
    parse_datetime,
)
from src.core.activities.use_cases import DEFAULT_PER_PAGE, DEFAULT_RECENT_LIMIT
from src.core.declarations.dtos import DeclaracaoInputDTO
from src.core.shared.exceptions import (
    FieldValidationError,
    ValidationError,
    EntityNotFoundError,
    BusinessRuleViolationError,
    DomainException,
)
from src.core.shared.validation import read_text
from src.config.container import get_container

from ..shared.database import check_database_connection

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("Corpo da requisição deve ser um objeto JSON")
    return data


def query_int(request: HttpRequest, name: str, default: int) -> int:
    """
    Lê parâmetro inteiro da query string.

    Raises:
        ValidationError: Se valor não for inteiro
    """
    value = request.GET.get(name)
    if value in (None, ''):
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Parâmetro {name} deve ser inteiro", field=name)


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        return get_container()

    def get_service(self, service_name: str):
        """Obtém use case do container pelo nome do provider."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(e)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Mapeamento:
        - FieldValidationError → 400 (meta.errors)
        - ValidationError → 400 (meta.field)
        - EntityNotFoundError → 404
        - BusinessRuleViolationError → 422 (meta.rule)
        - DomainException / ValueError → 400
        - Outros → 500
        """
        if isinstance(e, FieldValidationError):
            return json_response(
                success=False,
                error=str(e),
                status=400,
                meta={'errors': e.errors}
            )

        if isinstance(e, ValidationError):
            return json_response(
                success=False,
                error=str(e),
                status=400,
                meta={'field': getattr(e, 'field', None)}
            )

        if isinstance(e, EntityNotFoundError):
            return json_response(
                success=False,
                error=str(e),
                status=404
            )

        if isinstance(e, BusinessRuleViolationError):
            return json_response(
                success=False,
                error=str(e),
                status=422,
                meta={'rule': getattr(e, 'rule', None)}
            )

        if isinstance(e, DomainException):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        if isinstance(e, ValueError):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        # Erro inesperado
        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )


def _list_data(items) -> list:
    return [item.to_dict() for item in items]


# =============================================================================
# Users
# =============================================================================

class UserListAPIView(BaseAPIView):
    """
    GET /api/users/ - Lista usuários (?role=CLIENT|DRIVER|ADMIN)
    POST /api/users/ - Cadastro
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        users = self.get_service('listar_usuarios_service').execute(
            role=request.GET.get('role') or None
        )
        return json_response(success=True, data=_list_data(users), meta={'total': len(users)})

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "username": "string", "password": "string",
            "role": "CLIENT|DRIVER",
            "name": "string (CLIENT)", "unp": "9 dígitos (CLIENT)",
            "email": "string", "activity_type": "string"
        }
        """
        data = self.parse_body(request)
        output = self.get_service('registrar_usuario_service').execute(
            RegistrarUsuarioInputDTO.from_dict(data)
        )
        logger.info(f"API: Usuário cadastrado: {output.id}")
        return json_response(success=True, data=output.to_dict(), status=201)


class UserDetailAPIView(BaseAPIView):
    """
    GET /api/users/<id>/
    PUT /api/users/<id>/ - Atualização parcial (email, name, activity_type)
    DELETE /api/users/<id>/ - Remove usuário e dependentes
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        output = self.get_service('obter_usuario_service').execute(pk)
        return json_response(success=True, data=output.to_dict())

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service('atualizar_usuario_service').execute(
            pk, AtualizarUsuarioInputDTO.from_dict(data)
        )
        return json_response(success=True, data=output.to_dict())

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        self.get_service('remover_usuario_service').execute(pk)
        logger.info(f"API: Usuário removido: {pk}")
        return json_response(success=True, data={'id': pk, 'deleted': True})


class UserByUsernameAPIView(BaseAPIView):
    """GET /api/users/username/<username>/"""

    def get(self, request: HttpRequest, username: str) -> JsonResponse:
        output = self.get_service('obter_usuario_por_username_service').execute(username)
        return json_response(success=True, data=output.to_dict())


class UserCheckUsernameAPIView(BaseAPIView):
    """GET /api/users/check-username/<username>/ → {exists}"""

    def get(self, request: HttpRequest, username: str) -> JsonResponse:
        exists = self.get_service('verificar_username_service').execute(username)
        return json_response(success=True, data={'exists': exists})


# =============================================================================
# Vehicles
# =============================================================================

class VehicleListAPIView(BaseAPIView):
    """
    GET /api/vehicles/ - Lista veículos (?client_id=, ?vehicle_type=)
    POST /api/vehicles/ - Cadastra veículo
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        vehicles = self.get_service('listar_veiculos_service').execute(
            client_id=request.GET.get('client_id') or None,
            vehicle_type=request.GET.get('vehicle_type') or None,
        )
        return json_response(success=True, data=_list_data(vehicles), meta={'total': len(vehicles)})

    def post(self, request: HttpRequest) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service('criar_veiculo_service').execute(VeiculoInputDTO.from_dict(data))
        logger.info(f"API: Veículo criado: {output.id}")
        return json_response(success=True, data=output.to_dict(), status=201)


class VehicleDetailAPIView(BaseAPIView):
    """GET, PUT (substituição completa), DELETE /api/vehicles/<id>/"""

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        output = self.get_service('obter_veiculo_service').execute(pk)
        return json_response(success=True, data=output.to_dict())

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service('atualizar_veiculo_service').execute(
            pk, VeiculoInputDTO.from_dict(data)
        )
        return json_response(success=True, data=output.to_dict())

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        self.get_service('remover_veiculo_service').execute(pk)
        return json_response(success=True, data={'id': pk, 'deleted': True})


class VehicleByClientAPIView(BaseAPIView):
    """GET /api/vehicles/client/<client_id>/"""

    def get(self, request: HttpRequest, client_id: str) -> JsonResponse:
        vehicles = self.get_service('listar_veiculos_service').execute(client_id=client_id)
        return json_response(success=True, data=_list_data(vehicles), meta={'total': len(vehicles)})


class VehicleByTypeAPIView(BaseAPIView):
    """GET /api/vehicles/type/<vehicle_type>/"""

    def get(self, request: HttpRequest, vehicle_type: str) -> JsonResponse:
        vehicles = self.get_service('listar_veiculos_service').execute(vehicle_type=vehicle_type)
        return json_response(success=True, data=_list_data(vehicles), meta={'total': len(vehicles)})


class VehicleByLicensePlateAPIView(BaseAPIView):
    """GET /api/vehicles/license-plate/<license_plate>/"""

    def get(self, request: HttpRequest, license_plate: str) -> JsonResponse:
        output = self.get_service('obter_veiculo_por_placa_service').execute(license_plate)
        return json_response(success=True, data=output.to_dict())


class VehicleCheckLicensePlateAPIView(BaseAPIView):
    """GET /api/vehicles/check-license-plate/<license_plate>/ → {exists}"""

    def get(self, request: HttpRequest, license_plate: str) -> JsonResponse:
        exists = self.get_service('verificar_placa_service').execute(license_plate)
        return json_response(success=True, data={'exists': exists})


class VehicleClientStatsAPIView(BaseAPIView):
    """GET /api/vehicles/client/<client_id>/stats/"""

    def get(self, request: HttpRequest, client_id: str) -> JsonResponse:
        stats = self.get_service('estatisticas_veiculos_service').execute(client_id)
        return json_response(success=True, data=stats.to_dict())


# =============================================================================
# Activities
# =============================================================================

class ActivityListAPIView(BaseAPIView):
    """
    GET /api/activities/ - Lista todas as atividades
    POST /api/activities/ - Registra atividade {user_id, description, activity_date?}
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        activities = self.get_service('listar_atividades_service').execute()
        return json_response(success=True, data=_list_data(activities), meta={'total': len(activities)})

    def post(self, request: HttpRequest) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service('criar_atividade_service').execute(
            CriarAtividadeInputDTO.from_dict(data)
        )
        return json_response(success=True, data=output.to_dict(), status=201)


class ActivityForUsernameAPIView(BaseAPIView):
    """POST /api/activities/username/<username>/ {description}"""

    def post(self, request: HttpRequest, username: str) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service('criar_atividade_username_service').execute(
            username, read_text(data, 'description')
        )
        return json_response(success=True, data=output.to_dict(), status=201)


class ActivityDetailAPIView(BaseAPIView):
    """GET, PUT, DELETE /api/activities/<id>/"""

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        output = self.get_service('obter_atividade_service').execute(pk)
        return json_response(success=True, data=output.to_dict())

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service('atualizar_atividade_service').execute(
            pk, AtualizarAtividadeInputDTO.from_dict(data)
        )
        return json_response(success=True, data=output.to_dict())

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        self.get_service('remover_atividade_service').execute(pk)
        return json_response(success=True, data={'id': pk, 'deleted': True})


class ActivityByUserAPIView(BaseAPIView):
    """
    GET /api/activities/user/<user_id>/ - Atividades do usuário
    DELETE /api/activities/user/<user_id>/ - Remove todas as atividades do usuário
    """

    def get(self, request: HttpRequest, user_id: str) -> JsonResponse:
        activities = self.get_service('listar_atividades_service').execute(user_id=user_id)
        return json_response(success=True, data=_list_data(activities), meta={'total': len(activities)})

    def delete(self, request: HttpRequest, user_id: str) -> JsonResponse:
        removed = self.get_service('remover_atividades_usuario_service').execute(user_id)
        return json_response(success=True, data={'user_id': user_id, 'deleted': removed})


class ActivityRecentAPIView(BaseAPIView):
    """GET /api/activities/user/<user_id>/recent/?limit=5"""

    def get(self, request: HttpRequest, user_id: str) -> JsonResponse:
        limit = query_int(request, 'limit', DEFAULT_RECENT_LIMIT)
        activities = self.get_service('listar_atividades_recentes_service').execute(user_id, limit)
        return json_response(success=True, data=_list_data(activities))


class ActivityPageAPIView(BaseAPIView):
    """GET /api/activities/user/<user_id>/page/?page=1&per_page=10"""

    def get(self, request: HttpRequest, user_id: str) -> JsonResponse:
        result = self.get_service('listar_atividades_paginadas_service').execute(
            user_id,
            page=query_int(request, 'page', 1),
            per_page=query_int(request, 'per_page', DEFAULT_PER_PAGE),
        )
        return json_response(
            success=True,
            data=_list_data(result.items),
            meta={
                'total': result.total,
                'page': result.page,
                'per_page': result.per_page,
                'total_pages': result.total_pages,
                'has_next': result.has_next,
                'has_prev': result.has_prev,
            }
        )


class ActivityDateRangeAPIView(BaseAPIView):
    """
    GET /api/activities/date-range/?start_date=&end_date=
    GET /api/activities/user/<user_id>/date-range/?start_date=&end_date=
    """

    def get(self, request: HttpRequest, user_id: str = None) -> JsonResponse:
        activities = self.get_service('listar_atividades_periodo_service').execute(
            start=parse_datetime(request.GET.get('start_date'), 'start_date'),
            end=parse_datetime(request.GET.get('end_date'), 'end_date'),
            user_id=user_id,
        )
        return json_response(success=True, data=_list_data(activities), meta={'total': len(activities)})


class ActivitySearchAPIView(BaseAPIView):
    """GET /api/activities/user/<user_id>/search/?keyword="""

    def get(self, request: HttpRequest, user_id: str) -> JsonResponse:
        activities = self.get_service('buscar_atividades_service').execute(
            user_id, request.GET.get('keyword')
        )
        return json_response(success=True, data=_list_data(activities), meta={'total': len(activities)})


class ActivityStatsAPIView(BaseAPIView):
    """GET /api/activities/user/<user_id>/stats/"""

    def get(self, request: HttpRequest, user_id: str) -> JsonResponse:
        stats = self.get_service('estatisticas_atividades_service').execute(user_id)
        return json_response(success=True, data=stats.to_dict())


# =============================================================================
# Declarations
# =============================================================================

class DeclarationListAPIView(BaseAPIView):
    """
    GET /api/declarations/ - Lista (?status=, ?client_id=)
    POST /api/declarations/ - Cria declaração PENDING
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        declarations = self.get_service('listar_declaracoes_service').execute(
            client_id=request.GET.get('client_id') or None,
            status=request.GET.get('status') or None,
        )
        return json_response(
            success=True, data=_list_data(declarations), meta={'total': len(declarations)}
        )

    def post(self, request: HttpRequest) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service('criar_declaracao_service').execute(
            DeclaracaoInputDTO.from_dict(data)
        )
        logger.info(f"API: Declaração criada: {output.declaration_number}")
        return json_response(success=True, data=output.to_dict(), status=201)


class DeclarationDetailAPIView(BaseAPIView):
    """GET, PUT (somente PENDING), DELETE (somente PENDING) /api/declarations/<id>/"""

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        output = self.get_service('obter_declaracao_service').execute(pk)
        return json_response(success=True, data=output.to_dict())

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service('atualizar_declaracao_service').execute(
            pk, DeclaracaoInputDTO.from_dict(data)
        )
        return json_response(success=True, data=output.to_dict())

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        self.get_service('remover_declaracao_service').execute(pk)
        return json_response(success=True, data={'id': pk, 'deleted': True})


class DeclarationStatusAPIView(BaseAPIView):
    """PUT /api/declarations/<id>/status/ {status: APPROVED|REJECTED}"""

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.parse_body(request)
        output = self.get_service('alterar_status_declaracao_service').execute(
            pk, read_text(data, 'status')
        )
        logger.info(f"API: Declaração {output.declaration_number} → {output.status}")
        return json_response(success=True, data=output.to_dict())


class DeclarationByClientAPIView(BaseAPIView):
    """GET /api/declarations/client/<client_id>/"""

    def get(self, request: HttpRequest, client_id: str) -> JsonResponse:
        declarations = self.get_service('listar_declaracoes_service').execute(client_id=client_id)
        return json_response(
            success=True, data=_list_data(declarations), meta={'total': len(declarations)}
        )


class DeclarationClientStatsAPIView(BaseAPIView):
    """GET /api/declarations/client/<client_id>/stats/"""

    def get(self, request: HttpRequest, client_id: str) -> JsonResponse:
        stats = self.get_service('estatisticas_declaracoes_service').execute(client_id)
        return json_response(success=True, data=stats.to_dict())


# =============================================================================
# Health
# =============================================================================

class HealthAPIView(BaseAPIView):
    """GET /health/ - Status da aplicação e do banco."""

    def get(self, request: HttpRequest) -> JsonResponse:
        database = check_database_connection()
        status = 200 if database['healthy'] else 503
        return JsonResponse(
            {'status': 'ok' if database['healthy'] else 'degraded', 'database': database},
            status=status,
        )
