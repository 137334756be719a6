"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Domínios:
- users: cadastro de clientes, motoristas e administradores
- vehicles: frota de veículos dos clientes
- activities: registro de atividades por usuário
- declarations: declarações aduaneiras (máquina de estados)
"""
