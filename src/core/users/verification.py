"""
Verificação de UNP.

Serviço injetado no cadastro que decide a flag `verified`
do cliente. É independente da checagem de formato feita na
validação de regras de negócio.
"""

import logging

from .validation import unp_tem_formato_valido

logger = logging.getLogger(__name__)


class UnpVerificationService:
    """
    Verificador de UNP.

    A implementação atual confere apenas o formato (9 dígitos).
    Uma integração com serviço fiscal externo implementaria
    o mesmo método.
    """

    def verify_unp(self, unp: str) -> bool:
        verified = unp_tem_formato_valido(unp)
        logger.debug(f"UNP {unp} verificado: {verified}")
        return verified
