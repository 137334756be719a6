"""
Django app do back office aduaneiro.

Adapter de persistência e HTTP para os domínios de usuários,
veículos, atividades e declarações.
"""
