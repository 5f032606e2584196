from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'receipts'

router = SimpleRouter()
router.register(r'', views.ReceiptViewSet, basename='receipt')

urlpatterns = [
    # GET    /api/receipts/       - List the user's receipts
    # POST   /api/receipts/       - Create and send a receipt
    # GET    /api/receipts/{id}/  - Get one receipt
    path('', include(router.urls)),
]
