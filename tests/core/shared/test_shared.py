"""
Testes do núcleo compartilhado: exceções, validação, paginação e relógio.
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    DomainException,
    EntityNotFoundError,
    FieldValidationError,
    ValidationError,
)
from src.core.shared.interfaces import FixedClock, SystemClock
from src.core.shared.pagination import PaginatedResultDTO
from src.core.shared.validation import ValidationResult, is_blank, read_text


class TestExceptions:

    def test_str_inclui_codigo(self):
        assert str(DomainException("falhou", "X")) == "[X] falhou"

    def test_validation_error_codigo_por_campo(self):
        error = ValidationError("Placa é obrigatória", field="license_plate")

        assert error.code == "VALIDATION_ERROR_LICENSE_PLATE"
        assert error.to_dict() == {
            "error": "VALIDATION_ERROR_LICENSE_PLATE",
            "message": "Placa é obrigatória",
            "field": "license_plate",
        }

    def test_validation_error_sem_campo(self):
        assert ValidationError("x").code == "VALIDATION_ERROR"

    def test_field_validation_error_um_campo(self):
        error = FieldValidationError([{"field": "email", "message": "E-mail inválido"}])

        assert error.field == "email"
        assert error.message == "E-mail inválido"

    def test_field_validation_error_varios_campos(self):
        error = FieldValidationError([
            {"field": "username", "message": "Username é obrigatório"},
            {"field": "password", "message": "Senha é obrigatória"},
        ])

        assert error.field is None
        assert error.message == "Username é obrigatório; Senha é obrigatória"
        assert len(error.to_dict()["errors"]) == 2

    def test_entity_not_found_to_dict(self):
        error = EntityNotFoundError("não achei", entity_type="Vehicle", entity_id="v1")

        assert error.to_dict()["entity_type"] == "Vehicle"
        assert error.code == "ENTITY_NOT_FOUND"

    def test_business_rule_to_dict(self):
        error = BusinessRuleViolationError("não pode", rule="DECLARATION_NOT_PENDING")

        assert error.to_dict()["rule"] == "DECLARATION_NOT_PENDING"
        assert isinstance(error, DomainException)


class TestValidationResult:

    def test_valido_por_padrao(self):
        result = ValidationResult()

        assert result.is_valid
        result.raise_if_invalid()

    def test_require_acumula(self):
        result = ValidationResult()
        result.require("username", " ", "Username é obrigatório")
        result.require("password", None, "Senha é obrigatória")
        result.require("role", "CLIENT", "Papel é obrigatório")

        with pytest.raises(FieldValidationError) as exc_info:
            result.raise_if_invalid()

        assert [e["field"] for e in exc_info.value.errors] == ["username", "password"]

    @pytest.mark.parametrize("value,esperado", [(None, True), ("", True), ("  ", True), ("x", False), (0, False)])
    def test_is_blank(self, value, esperado):
        assert is_blank(value) is esperado


class TestReadText:

    def test_ausente_ou_nulo(self):
        assert read_text({}, "name") is None
        assert read_text({"name": None}, "name") is None

    def test_texto_preservado(self):
        assert read_text({"name": " ACME "}, "name", max_length=6) == " ACME "

    @pytest.mark.parametrize("value", [123, 1.5, True, ["a"], {"a": 1}])
    def test_nao_textual_rejeitado(self, value):
        with pytest.raises(ValidationError) as exc_info:
            read_text({"username": value}, "username")

        assert exc_info.value.field == "username"

    def test_acima_do_tamanho(self):
        with pytest.raises(ValidationError) as exc_info:
            read_text({"license_plate": "A" * 21}, "license_plate", max_length=20)

        assert exc_info.value.field == "license_plate"
        assert "20" in exc_info.value.message


class TestPaginatedResult:

    def test_ultima_pagina(self):
        page = PaginatedResultDTO(items=[], total=21, page=3, per_page=10)

        assert page.total_pages == 3
        assert page.has_next is False
        assert page.has_prev is True

    def test_sem_itens(self):
        page = PaginatedResultDTO(items=[], total=0, page=1, per_page=10)

        assert page.total_pages == 0
        assert page.has_next is False
        assert page.has_prev is False


class TestClock:

    def test_fixed_clock_advance(self):
        instante = datetime(2024, 1, 1, tzinfo=timezone.utc)
        clock = FixedClock(instante)

        clock.advance(minutes=5)

        assert clock.now() == instante + timedelta(minutes=5)

    def test_system_clock_utc(self):
        assert SystemClock().now().tzinfo == timezone.utc
