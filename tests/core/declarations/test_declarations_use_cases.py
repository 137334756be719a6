"""
Testes Unitários para o Domínio de Declarações Aduaneiras.

Coverage:
- DeclarationEntity (máquina de estados, defaults, validações)
- Numeração sequencial TD-<ano>-<00000>
- Criação, consulta, listagem, atualização, revisão e remoção
- Estatísticas por status
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from src.core.declarations.dtos import DeclaracaoInputDTO
from src.core.declarations.entities import DeclarationEntity, DeclarationStatus
from src.core.declarations.use_cases import (
    AlterarStatusDeclaracaoService,
    AtualizarDeclaracaoService,
    CriarDeclaracaoService,
    EstatisticasDeclaracoesClienteService,
    ListarDeclaracoesService,
    ObterDeclaracaoService,
    RemoverDeclaracaoService,
    formatar_numero_declaracao,
)
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    EntityNotFoundError,
    ValidationError,
)


def _dto(client_id, **overrides):
    data = dict(
        client_id=client_id,
        declaration_type="IMPORT",
        product_description="Peças automotivas",
    )
    data.update(overrides)
    return DeclaracaoInputDTO(**data)


@pytest.fixture
def criar_service(declaration_repo, user_repo, uow, clock):
    return CriarDeclaracaoService(declaration_repo, user_repo, uow, clock)


@pytest.fixture
def revisar_service(declaration_repo, user_repo, uow, clock):
    return AlterarStatusDeclaracaoService(declaration_repo, user_repo, uow, clock)


@pytest.fixture
def declaracao(criar_service, cliente):
    return criar_service.execute(_dto(
        cliente.id,
        tnved_code="8708.29",
        product_value=Decimal("15000.50"),
        net_weight=Decimal("320.5"),
        quantity=12,
        country_of_origin="DE",
        country_of_destination="BR",
        customs_office="Santos",
    ))


class TestDeclarationEntity:

    def test_nasce_pendente_com_defaults_zero(self):
        declaration = DeclarationEntity.criar("TD-2024-00001", "c1", "EXPORT", "Café")

        assert declaration.status == DeclarationStatus.PENDING
        assert declaration.product_value == Decimal("0")
        assert declaration.net_weight == Decimal("0")
        assert declaration.quantity == 0
        assert declaration.reviewed_at is None

    def test_valor_negativo_erro(self):
        with pytest.raises(ValidationError) as exc_info:
            DeclarationEntity.criar(
                "TD-2024-00001", "c1", "EXPORT", "Café", product_value=Decimal("-1"),
            )

        assert exc_info.value.field == "product_value"

    @pytest.mark.parametrize("tipo,descricao,campo", [
        ("", "Café", "declaration_type"),
        ("EXPORT", "  ", "product_description"),
    ])
    def test_campos_obrigatorios(self, tipo, descricao, campo):
        with pytest.raises(ValidationError) as exc_info:
            DeclarationEntity.criar("TD-2024-00001", "c1", tipo, descricao)

        assert exc_info.value.field == campo

    def test_aprovar_registra_revisao(self, clock):
        declaration = DeclarationEntity.criar("TD-2024-00001", "c1", "EXPORT", "Café")

        declaration.revisar(DeclarationStatus.APPROVED, clock.now())

        assert declaration.status == DeclarationStatus.APPROVED
        assert declaration.reviewed_at == clock.now()
        assert declaration.pode_ser_editada is False

    def test_estado_terminal_nao_muda(self):
        declaration = DeclarationEntity.criar("TD-2024-00001", "c1", "EXPORT", "Café")
        declaration.revisar(DeclarationStatus.REJECTED)

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            declaration.revisar(DeclarationStatus.APPROVED)

        assert exc_info.value.rule == "INVALID_STATUS_TRANSITION"
        assert declaration.status == DeclarationStatus.REJECTED

    def test_nao_volta_para_pendente(self):
        declaration = DeclarationEntity.criar("TD-2024-00001", "c1", "EXPORT", "Café")

        with pytest.raises(BusinessRuleViolationError):
            declaration.revisar(DeclarationStatus.PENDING)

    def test_status_from_string(self):
        assert DeclarationStatus.from_string(" approved ") == DeclarationStatus.APPROVED

        with pytest.raises(ValueError):
            DeclarationStatus.from_string("ARCHIVED")


class TestDeclaracaoInputDTO:

    @pytest.mark.parametrize("campo,valor", [
        ("product_value", "NaN"),
        ("product_value", "Infinity"),
        ("product_value", "10000000000000"),
        ("net_weight", "-Infinity"),
        ("net_weight", "1000000000"),
        ("product_value", True),
        ("quantity", 2 ** 31),
        ("quantity", float("nan")),
    ])
    def test_numero_invalido_rejeitado(self, campo, valor):
        with pytest.raises(ValidationError) as exc_info:
            DeclaracaoInputDTO.from_dict({
                "declaration_type": "IMPORT", "product_description": "Soja", campo: valor,
            })

        assert exc_info.value.field == campo

    @pytest.mark.parametrize("campo", ["declaration_type", "product_description", "client_id"])
    def test_texto_nao_textual_rejeitado(self, campo):
        data = {"declaration_type": "IMPORT", "product_description": "Soja"}
        data[campo] = 7

        with pytest.raises(ValidationError) as exc_info:
            DeclaracaoInputDTO.from_dict(data)

        assert exc_info.value.field == campo


class TestNumeracao:

    def test_formato(self):
        assert formatar_numero_declaracao("TD", 2024, 7) == "TD-2024-00007"

    def test_sequencial(self, criar_service, cliente):
        primeira = criar_service.execute(_dto(cliente.id))
        segunda = criar_service.execute(_dto(cliente.id))

        assert primeira.declaration_number == "TD-2024-00001"
        assert segunda.declaration_number == "TD-2024-00002"

    def test_numero_nao_reutilizado_apos_remocao(
        self, criar_service, declaration_repo, uow, cliente
    ):
        primeira = criar_service.execute(_dto(cliente.id))
        RemoverDeclaracaoService(declaration_repo, uow).execute(primeira.id)

        segunda = criar_service.execute(_dto(cliente.id))

        assert segunda.declaration_number == "TD-2024-00002"

    def test_prefixo_configuravel(self, declaration_repo, user_repo, uow, clock, cliente):
        service = CriarDeclaracaoService(
            declaration_repo, user_repo, uow, clock, number_prefix="DT",
        )

        assert service.execute(_dto(cliente.id)).declaration_number == "DT-2024-00001"

    def test_ano_vem_do_relogio(self, criar_service, clock, cliente):
        clock.advance(days=365)

        assert criar_service.execute(_dto(cliente.id)).declaration_number.startswith("TD-2025-")


class TestCriarDeclaracao:

    def test_criar_sucesso(self, declaracao, cliente, clock, uow):
        assert declaracao.status == "PENDING"
        assert declaracao.client_name == "ACME Logística"
        assert declaracao.product_value == Decimal("15000.50")
        assert declaracao.submitted_at == clock.now()
        assert declaracao.reviewed_at is None
        assert uow.committed is True

    def test_to_dict_valores_como_texto(self, declaracao):
        data = declaracao.to_dict()

        assert data["product_value"] == "15000.50"
        assert data["net_weight"] == "320.5"
        assert data["quantity"] == 12

    def test_cliente_inexistente_erro(self, criar_service, declaration_repo):
        with pytest.raises(EntityNotFoundError):
            criar_service.execute(_dto("fantasma"))

        assert declaration_repo.list_all() == []

    def test_sem_cliente_erro(self, criar_service):
        with pytest.raises(ValidationError) as exc_info:
            criar_service.execute(_dto(None))

        assert exc_info.value.field == "client_id"

    def test_valor_negativo_nao_consome_numero(self, criar_service, cliente):
        with pytest.raises(ValidationError):
            criar_service.execute(_dto(cliente.id, product_value=Decimal("-10")))

        assert criar_service.execute(_dto(cliente.id)).declaration_number == "TD-2024-00001"

    def test_from_dict_converte_numeros(self):
        dto = DeclaracaoInputDTO.from_dict({
            "declaration_type": "IMPORT",
            "product_description": "Soja",
            "product_value": "99.90",
            "net_weight": 10,
            "quantity": "3",
        })

        assert dto.product_value == Decimal("99.90")
        assert dto.net_weight == Decimal("10")
        assert dto.quantity == 3

    def test_from_dict_numero_invalido_erro(self):
        with pytest.raises(ValidationError) as exc_info:
            DeclaracaoInputDTO.from_dict({"quantity": "muitos"})

        assert exc_info.value.field == "quantity"


class TestConsultasDeclaracao:

    def test_obter(self, declaration_repo, user_repo, declaracao):
        output = ObterDeclaracaoService(declaration_repo, user_repo).execute(declaracao.id)

        assert output.declaration_number == declaracao.declaration_number

    def test_obter_inexistente(self, declaration_repo, user_repo):
        with pytest.raises(EntityNotFoundError) as exc_info:
            ObterDeclaracaoService(declaration_repo, user_repo).execute("x")

        assert exc_info.value.entity_type == "Declaration"

    def test_listar_por_status_e_cliente(
        self, criar_service, revisar_service, declaration_repo, user_repo, declaracao, cliente
    ):
        outra = criar_service.execute(_dto(cliente.id))
        revisar_service.execute(outra.id, "APPROVED")
        service = ListarDeclaracoesService(declaration_repo, user_repo)

        assert len(service.execute()) == 2
        assert len(service.execute(client_id=cliente.id)) == 2
        assert [d.id for d in service.execute(status="approved")] == [outra.id]
        assert [d.id for d in service.execute(status="PENDING")] == [declaracao.id]

    def test_listar_status_invalido_erro(self, declaration_repo, user_repo):
        with pytest.raises(ValidationError) as exc_info:
            ListarDeclaracoesService(declaration_repo, user_repo).execute(status="ARQUIVADA")

        assert exc_info.value.field == "status"


class TestAtualizarDeclaracao:

    def test_atualizar_pendente(self, declaration_repo, user_repo, uow, declaracao):
        output = AtualizarDeclaracaoService(declaration_repo, user_repo, uow).execute(
            declaracao.id,
            _dto(None, declaration_type="EXPORT", product_description="Pneus"),
        )

        assert output.declaration_type == "EXPORT"
        assert output.product_description == "Pneus"
        assert output.product_value == Decimal("0")
        assert output.declaration_number == declaracao.declaration_number

    def test_atualizar_revisada_erro(
        self, declaration_repo, user_repo, uow, revisar_service, declaracao
    ):
        revisar_service.execute(declaracao.id, "REJECTED")

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            AtualizarDeclaracaoService(declaration_repo, user_repo, uow).execute(
                declaracao.id,
                _dto(
                    None,
                    declaration_type="EXPORT",
                    product_description="Pneus",
                    product_value=Decimal("1"),
                    quantity=1,
                ),
            )

        assert exc_info.value.rule == "DECLARATION_NOT_PENDING"
        stored = declaration_repo.get_by_id(declaracao.id)
        assert stored.status == DeclarationStatus.REJECTED
        assert stored.declaration_type == "IMPORT"
        assert stored.product_description == "Peças automotivas"
        assert stored.product_value == Decimal("15000.50")
        assert stored.net_weight == Decimal("320.5")
        assert stored.quantity == 12
        assert stored.customs_office == "Santos"

    def test_atualizar_inexistente(self, declaration_repo, user_repo, uow):
        with pytest.raises(EntityNotFoundError):
            AtualizarDeclaracaoService(declaration_repo, user_repo, uow).execute("x", _dto(None))


class TestRevisarDeclaracao:

    def test_aprovar(self, revisar_service, declaracao, clock):
        clock.advance(hours=2)

        output = revisar_service.execute(declaracao.id, "approved")

        assert output.status == "APPROVED"
        assert output.reviewed_at == declaracao.submitted_at + timedelta(hours=2)

    def test_segunda_revisao_erro(self, revisar_service, declaracao, uow):
        revisar_service.execute(declaracao.id, "APPROVED")

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            revisar_service.execute(declaracao.id, "REJECTED")

        assert exc_info.value.rule == "INVALID_STATUS_TRANSITION"
        assert uow.rolled_back is True

    def test_voltar_para_pendente_erro(self, revisar_service, declaracao):
        with pytest.raises(BusinessRuleViolationError):
            revisar_service.execute(declaracao.id, "PENDING")

    @pytest.mark.parametrize("status", [None, "", "ARQUIVADA"])
    def test_status_invalido_erro(self, revisar_service, declaracao, status):
        with pytest.raises(ValidationError) as exc_info:
            revisar_service.execute(declaracao.id, status)

        assert exc_info.value.field == "status"


class TestRemoverDeclaracao:

    def test_remover_pendente(self, declaration_repo, uow, declaracao):
        RemoverDeclaracaoService(declaration_repo, uow).execute(declaracao.id)

        assert declaration_repo.get_by_id(declaracao.id) is None

    def test_remover_aprovada_erro(self, declaration_repo, uow, revisar_service, declaracao):
        revisar_service.execute(declaracao.id, "APPROVED")

        with pytest.raises(BusinessRuleViolationError) as exc_info:
            RemoverDeclaracaoService(declaration_repo, uow).execute(declaracao.id)

        assert exc_info.value.rule == "DECLARATION_NOT_PENDING"
        assert declaration_repo.get_by_id(declaracao.id) is not None


class TestEstatisticasDeclaracoes:

    def test_por_status(self, criar_service, revisar_service, declaration_repo, user_repo, cliente):
        ids = [criar_service.execute(_dto(cliente.id)).id for _ in range(4)]
        revisar_service.execute(ids[0], "APPROVED")
        revisar_service.execute(ids[1], "REJECTED")
        revisar_service.execute(ids[2], "REJECTED")

        stats = EstatisticasDeclaracoesClienteService(declaration_repo, user_repo).execute(cliente.id)

        assert stats.to_dict() == {
            "total_declarations": 4,
            "by_status": {"PENDING": 1, "APPROVED": 1, "REJECTED": 2},
        }

    def test_cliente_inexistente(self, declaration_repo, user_repo):
        with pytest.raises(EntityNotFoundError):
            EstatisticasDeclaracoesClienteService(declaration_repo, user_repo).execute("x")
