"""
Django Admin do back office aduaneiro.

A tabela de UNP é mantida por aqui; os demais cadastros passam
pela API (regras de negócio nos use cases) e ficam somente
para consulta.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import (
    ActivityModel,
    DeclarationModel,
    UnpModel,
    UserModel,
    VehicleModel,
)


class ReadOnlyAdmin(admin.ModelAdmin):
    """Admin de consulta: sem inclusão, edição ou remoção."""

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(UnpModel)
class UnpAdmin(admin.ModelAdmin):
    """Admin para a tabela de referência de UNP."""

    list_display = ['unp', 'company_name', 'vinculado']
    search_fields = ['unp', 'company_name']
    ordering = ['unp']

    def vinculado(self, obj):
        """Indica se o UNP já pertence a um cliente."""
        return hasattr(obj, 'user')
    vinculado.boolean = True
    vinculado.short_description = 'Vinculado'


@admin.register(UserModel)
class UserAdmin(ReadOnlyAdmin):
    """Admin para usuários."""

    list_display = ['username', 'role', 'name', 'email', 'unp', 'verified', 'created_at']
    list_filter = ['role', 'verified']
    search_fields = ['username', 'name', 'email', 'unp__unp']
    exclude = ['password']


@admin.register(VehicleModel)
class VehicleAdmin(ReadOnlyAdmin):
    """Admin para veículos."""

    list_display = ['license_plate', 'model', 'vehicle_type', 'capacity', 'client', 'created_at']
    list_filter = ['vehicle_type']
    search_fields = ['license_plate', 'model', 'client__username', 'client__name']


@admin.register(ActivityModel)
class ActivityAdmin(ReadOnlyAdmin):
    """Admin para atividades."""

    list_display = ['user', 'resumo', 'activity_date']
    search_fields = ['description', 'user__username']
    date_hierarchy = 'activity_date'

    def resumo(self, obj):
        """Primeiros 60 caracteres da descrição."""
        if len(obj.description) > 60:
            return obj.description[:60] + '...'
        return obj.description
    resumo.short_description = 'Descrição'


@admin.register(DeclarationModel)
class DeclarationAdmin(ReadOnlyAdmin):
    """Admin para declarações."""

    list_display = [
        'declaration_number',
        'client',
        'declaration_type',
        'product_value',
        'status_badge',
        'submitted_at',
        'reviewed_at',
    ]
    list_filter = ['status', 'declaration_type']
    search_fields = ['declaration_number', 'product_description', 'tnved_code', 'client__name']
    date_hierarchy = 'submitted_at'

    def status_badge(self, obj):
        """Exibe status com badge colorido."""
        colors = {
            'PENDING': '#ffc107',
            'APPROVED': '#28a745',
            'REJECTED': '#dc3545',
        }
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            colors.get(obj.status, '#6c757d'),
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'
