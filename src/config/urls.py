"""
URL Configuration do back office aduaneiro.

Estrutura:
- /admin/ - Django Admin (manutenção da tabela de UNP)
- /api/ - API JSON (usuários, veículos, atividades, declarações)
- /health/ - Health check com status do banco
"""

from django.contrib import admin
from django.urls import path, include

from src.adapters.django_app.customs.api_views import HealthAPIView

urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # API
    path('api/', include('src.adapters.django_app.customs.urls')),

    # Health check
    path('health/', HealthAPIView.as_view(), name='health'),
]
