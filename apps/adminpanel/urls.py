from django.urls import path
from . import views

app_name = 'adminpanel'

urlpatterns = [
    # Session
    path('login/', views.admin_login, name='login'),
    path('logout/', views.admin_logout, name='logout'),
    path('status/', views.admin_status, name='status'),

    # Dashboard
    path('users/', views.admin_users, name='users'),
    path('receipts/', views.admin_receipts, name='receipts'),
    path('add-credits/', views.add_credits, name='add-credits'),
    path('stats/', views.admin_stats, name='stats'),
]
