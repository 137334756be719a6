"""
URLs da API do back office aduaneiro (montadas em /api/).
"""

from django.urls import path

from . import api_views

app_name = 'customs'

urlpatterns = [
    # Usuários
    path('users/', api_views.UserListAPIView.as_view(), name='user-list'),
    path(
        'users/check-username/<str:username>/',
        api_views.UserCheckUsernameAPIView.as_view(),
        name='user-check-username',
    ),
    path(
        'users/username/<str:username>/',
        api_views.UserByUsernameAPIView.as_view(),
        name='user-by-username',
    ),
    path('users/<str:pk>/', api_views.UserDetailAPIView.as_view(), name='user-detail'),

    # Veículos
    path('vehicles/', api_views.VehicleListAPIView.as_view(), name='vehicle-list'),
    path(
        'vehicles/client/<str:client_id>/stats/',
        api_views.VehicleClientStatsAPIView.as_view(),
        name='vehicle-client-stats',
    ),
    path(
        'vehicles/client/<str:client_id>/',
        api_views.VehicleByClientAPIView.as_view(),
        name='vehicle-by-client',
    ),
    path(
        'vehicles/type/<str:vehicle_type>/',
        api_views.VehicleByTypeAPIView.as_view(),
        name='vehicle-by-type',
    ),
    path(
        'vehicles/license-plate/<str:license_plate>/',
        api_views.VehicleByLicensePlateAPIView.as_view(),
        name='vehicle-by-license-plate',
    ),
    path(
        'vehicles/check-license-plate/<str:license_plate>/',
        api_views.VehicleCheckLicensePlateAPIView.as_view(),
        name='vehicle-check-license-plate',
    ),
    path('vehicles/<str:pk>/', api_views.VehicleDetailAPIView.as_view(), name='vehicle-detail'),

    # Atividades
    path('activities/', api_views.ActivityListAPIView.as_view(), name='activity-list'),
    path(
        'activities/date-range/',
        api_views.ActivityDateRangeAPIView.as_view(),
        name='activity-date-range',
    ),
    path(
        'activities/username/<str:username>/',
        api_views.ActivityForUsernameAPIView.as_view(),
        name='activity-for-username',
    ),
    path(
        'activities/user/<str:user_id>/recent/',
        api_views.ActivityRecentAPIView.as_view(),
        name='activity-user-recent',
    ),
    path(
        'activities/user/<str:user_id>/page/',
        api_views.ActivityPageAPIView.as_view(),
        name='activity-user-page',
    ),
    path(
        'activities/user/<str:user_id>/date-range/',
        api_views.ActivityDateRangeAPIView.as_view(),
        name='activity-user-date-range',
    ),
    path(
        'activities/user/<str:user_id>/search/',
        api_views.ActivitySearchAPIView.as_view(),
        name='activity-user-search',
    ),
    path(
        'activities/user/<str:user_id>/stats/',
        api_views.ActivityStatsAPIView.as_view(),
        name='activity-user-stats',
    ),
    path(
        'activities/user/<str:user_id>/',
        api_views.ActivityByUserAPIView.as_view(),
        name='activity-by-user',
    ),
    path('activities/<str:pk>/', api_views.ActivityDetailAPIView.as_view(), name='activity-detail'),

    # Declarações
    path('declarations/', api_views.DeclarationListAPIView.as_view(), name='declaration-list'),
    path(
        'declarations/client/<str:client_id>/stats/',
        api_views.DeclarationClientStatsAPIView.as_view(),
        name='declaration-client-stats',
    ),
    path(
        'declarations/client/<str:client_id>/',
        api_views.DeclarationByClientAPIView.as_view(),
        name='declaration-by-client',
    ),
    path(
        'declarations/<str:pk>/status/',
        api_views.DeclarationStatusAPIView.as_view(),
        name='declaration-status',
    ),
    path(
        'declarations/<str:pk>/',
        api_views.DeclarationDetailAPIView.as_view(),
        name='declaration-detail',
    ),
]
