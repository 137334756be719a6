"""
Testes Unitários para o Domínio de Atividades.

Coverage:
- ActivityEntity (validação de descrição)
- Criação por id e por username
- Listagens: todas, por usuário, recentes, paginadas, por período, busca
- Atualização e remoção
- Estatísticas (total e hoje, pelo relógio injetado)
"""

from datetime import datetime, timezone

import pytest

from src.core.activities.dtos import (
    AtualizarAtividadeInputDTO,
    CriarAtividadeInputDTO,
    parse_datetime,
)
from src.core.activities.entities import ActivityEntity
from src.core.activities.use_cases import (
    AtualizarAtividadeService,
    BuscarAtividadesService,
    CriarAtividadeParaUsernameService,
    CriarAtividadeService,
    EstatisticasAtividadesUsuarioService,
    ListarAtividadesPaginadasService,
    ListarAtividadesPorPeriodoService,
    ListarAtividadesRecentesService,
    ListarAtividadesService,
    ObterAtividadeService,
    RemoverAtividadeService,
    RemoverAtividadesUsuarioService,
)
from src.core.shared.exceptions import EntityNotFoundError, ValidationError


def _em(dia, hora=12):
    return datetime(2024, 5, dia, hora, 0, tzinfo=timezone.utc)


@pytest.fixture
def criar_service(activity_repo, user_repo, uow, clock):
    return CriarAtividadeService(activity_repo, user_repo, uow, clock)


@pytest.fixture
def historico(criar_service, cliente):
    """Sete atividades do cliente, uma por dia de 4 a 10 de maio."""
    return [
        criar_service.execute(CriarAtividadeInputDTO(
            user_id=cliente.id,
            description=f"Despacho de carga #{dia}",
            activity_date=_em(dia),
        ))
        for dia in range(4, 11)
    ]


class TestActivityEntity:

    def test_descricao_obrigatoria(self):
        with pytest.raises(ValidationError) as exc_info:
            ActivityEntity.criar("user-1", "   ")

        assert exc_info.value.field == "description"

    def test_descricao_limite_tamanho(self):
        ActivityEntity.criar("user-1", "x" * ActivityEntity.DESCRIPTION_MAX_LENGTH)

        with pytest.raises(ValidationError):
            ActivityEntity.criar("user-1", "x" * (ActivityEntity.DESCRIPTION_MAX_LENGTH + 1))

    def test_data_default_e_agora(self):
        activity = ActivityEntity.criar("user-1", "Conferência", agora=_em(1))

        assert activity.activity_date == _em(1)


class TestParseDatetime:

    def test_sufixo_z(self):
        assert parse_datetime("2024-05-10T08:30:00Z", "d") == datetime(
            2024, 5, 10, 8, 30, tzinfo=timezone.utc
        )

    def test_sem_fuso_assume_utc(self):
        assert parse_datetime("2024-05-10T08:30:00", "d").tzinfo == timezone.utc

    def test_vazio_retorna_none(self):
        assert parse_datetime("", "d") is None

    def test_invalido_erro(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_datetime("ontem", "start_date")

        assert exc_info.value.field == "start_date"


class TestCriarAtividade:

    def test_criar_sem_data_usa_relogio(self, criar_service, cliente, clock, uow):
        output = criar_service.execute(CriarAtividadeInputDTO(
            user_id=cliente.id, description="Conferência de documentos",
        ))

        assert output.activity_date == clock.now()
        assert output.user_name == "acme"
        assert uow.committed is True

    def test_criar_usuario_inexistente_erro(self, criar_service):
        with pytest.raises(EntityNotFoundError):
            criar_service.execute(CriarAtividadeInputDTO(user_id="x", description="Algo"))

    def test_criar_sem_usuario_erro(self, criar_service):
        with pytest.raises(ValidationError) as exc_info:
            criar_service.execute(CriarAtividadeInputDTO(user_id=None, description="Algo"))

        assert exc_info.value.field == "user_id"

    def test_criar_por_username(self, activity_repo, user_repo, uow, clock, motorista):
        output = CriarAtividadeParaUsernameService(activity_repo, user_repo, uow, clock).execute(
            "joao", "Entrega realizada",
        )

        assert output.user_id == motorista.id
        assert output.description == "Entrega realizada"

    def test_criar_por_username_inexistente(self, activity_repo, user_repo, uow, clock):
        with pytest.raises(EntityNotFoundError):
            CriarAtividadeParaUsernameService(activity_repo, user_repo, uow, clock).execute(
                "ninguem", "Algo",
            )


class TestListagensAtividade:

    def test_listar_por_usuario_mais_recente_primeiro(
        self, activity_repo, user_repo, historico, cliente
    ):
        output = ListarAtividadesService(activity_repo, user_repo).execute(user_id=cliente.id)

        datas = [a.activity_date for a in output]
        assert datas == sorted(datas, reverse=True)
        assert len(output) == 7

    def test_listar_usuario_inexistente_erro(self, activity_repo, user_repo):
        with pytest.raises(EntityNotFoundError):
            ListarAtividadesService(activity_repo, user_repo).execute(user_id="x")

    def test_recentes_default_cinco(self, activity_repo, user_repo, historico, cliente):
        output = ListarAtividadesRecentesService(activity_repo, user_repo).execute(cliente.id)

        assert len(output) == 5
        assert output[0].activity_date == _em(10)

    def test_recentes_limite_invalido(self, activity_repo, user_repo, cliente):
        with pytest.raises(ValidationError) as exc_info:
            ListarAtividadesRecentesService(activity_repo, user_repo).execute(cliente.id, 0)

        assert exc_info.value.field == "limit"

    def test_paginacao(self, activity_repo, user_repo, historico, cliente):
        service = ListarAtividadesPaginadasService(activity_repo, user_repo)

        pagina = service.execute(cliente.id, page=2, per_page=3)

        assert pagina.total == 7
        assert pagina.total_pages == 3
        assert [a.activity_date for a in pagina.items] == [_em(7), _em(6), _em(5)]
        assert pagina.has_next is True
        assert pagina.has_prev is True

    def test_paginacao_alem_do_fim_vazia(self, activity_repo, user_repo, historico, cliente):
        pagina = ListarAtividadesPaginadasService(activity_repo, user_repo).execute(
            cliente.id, page=9, per_page=3,
        )

        assert pagina.items == []
        assert pagina.total == 7

    @pytest.mark.parametrize("page,per_page", [(0, 10), (1, 0), (1, 101)])
    def test_paginacao_parametros_invalidos(self, activity_repo, user_repo, cliente, page, per_page):
        with pytest.raises(ValidationError):
            ListarAtividadesPaginadasService(activity_repo, user_repo).execute(
                cliente.id, page=page, per_page=per_page,
            )

    def test_periodo_inclusivo(self, activity_repo, user_repo, historico, cliente, criar_service, motorista):
        criar_service.execute(CriarAtividadeInputDTO(
            user_id=motorista.id, description="Viagem", activity_date=_em(6),
        ))
        service = ListarAtividadesPorPeriodoService(activity_repo, user_repo)

        todas = service.execute(_em(5), _em(7))
        do_cliente = service.execute(_em(5), _em(7), user_id=cliente.id)

        assert len(todas) == 4
        assert len(do_cliente) == 3

    def test_periodo_invertido_erro(self, activity_repo, user_repo):
        with pytest.raises(ValidationError):
            ListarAtividadesPorPeriodoService(activity_repo, user_repo).execute(_em(7), _em(5))

    def test_periodo_sem_data_erro(self, activity_repo, user_repo):
        with pytest.raises(ValidationError) as exc_info:
            ListarAtividadesPorPeriodoService(activity_repo, user_repo).execute(None, _em(5))

        assert exc_info.value.field == "start_date"

    def test_busca_case_insensitive(self, activity_repo, user_repo, historico, cliente, criar_service):
        criar_service.execute(CriarAtividadeInputDTO(
            user_id=cliente.id, description="Vistoria ALFANDEGA",
        ))

        output = BuscarAtividadesService(activity_repo, user_repo).execute(cliente.id, "alfandega")

        assert [a.description for a in output] == ["Vistoria ALFANDEGA"]

    def test_busca_sem_palavra_chave_erro(self, activity_repo, user_repo, cliente):
        with pytest.raises(ValidationError) as exc_info:
            BuscarAtividadesService(activity_repo, user_repo).execute(cliente.id, " ")

        assert exc_info.value.field == "keyword"


class TestAtualizarRemoverAtividade:

    def test_obter(self, activity_repo, user_repo, historico):
        output = ObterAtividadeService(activity_repo, user_repo).execute(historico[0].id)

        assert output.description == "Despacho de carga #4"

    def test_obter_inexistente(self, activity_repo, user_repo):
        with pytest.raises(EntityNotFoundError):
            ObterAtividadeService(activity_repo, user_repo).execute("x")

    def test_atualizar_descricao_mantem_data(self, activity_repo, user_repo, uow, historico):
        output = AtualizarAtividadeService(activity_repo, user_repo, uow).execute(
            historico[0].id, AtualizarAtividadeInputDTO(description="Despacho corrigido"),
        )

        assert output.description == "Despacho corrigido"
        assert output.activity_date == _em(4)

    def test_atualizar_descricao_vazia_erro(self, activity_repo, user_repo, uow, historico):
        with pytest.raises(ValidationError):
            AtualizarAtividadeService(activity_repo, user_repo, uow).execute(
                historico[0].id, AtualizarAtividadeInputDTO(description=""),
            )

    def test_remover(self, activity_repo, uow, historico):
        RemoverAtividadeService(activity_repo, uow).execute(historico[0].id)

        assert activity_repo.get_by_id(historico[0].id) is None

    def test_remover_todas_do_usuario(self, activity_repo, user_repo, uow, historico, cliente):
        removidas = RemoverAtividadesUsuarioService(activity_repo, user_repo, uow).execute(cliente.id)

        assert removidas == 7
        assert activity_repo.count_by_user(cliente.id) == 0


class TestEstatisticasAtividades:

    def test_total_e_hoje(self, activity_repo, user_repo, clock, historico, cliente):
        """Hoje é 10/05 pelo relógio fixo; só uma atividade cai nesse dia."""
        stats = EstatisticasAtividadesUsuarioService(activity_repo, user_repo, clock).execute(
            cliente.id
        )

        assert stats.total_activities == 7
        assert stats.today_activities == 1

    def test_hoje_segue_o_relogio(self, activity_repo, user_repo, clock, historico, cliente):
        clock.advance(days=1)

        stats = EstatisticasAtividadesUsuarioService(activity_repo, user_repo, clock).execute(
            cliente.id
        )

        assert stats.today_activities == 0

    def test_meia_noite_do_dia_seguinte_fica_fora(self, activity_repo, user_repo, clock, criar_service, cliente):
        criar_service.execute(CriarAtividadeInputDTO(
            user_id=cliente.id, description="Virada", activity_date=_em(11, hora=0),
        ))

        stats = EstatisticasAtividadesUsuarioService(activity_repo, user_repo, clock).execute(
            cliente.id
        )

        assert stats.total_activities == 1
        assert stats.today_activities == 0

    def test_usuario_inexistente(self, activity_repo, user_repo, clock):
        with pytest.raises(EntityNotFoundError):
            EstatisticasAtividadesUsuarioService(activity_repo, user_repo, clock).execute("x")

