from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'subscriptions'

router = DefaultRouter()
router.register(r'', views.SubscriptionViewSet, basename='subscription')

urlpatterns = [
    # GET    /api/subscriptions/                    - List subscriptions
    # POST   /api/subscriptions/                    - Create subscription
    # GET    /api/subscriptions/{id}/               - Get subscription
    # PUT    /api/subscriptions/{id}/               - Update subscription
    # PATCH  /api/subscriptions/{id}/               - Partial update
    # DELETE /api/subscriptions/{id}/               - Delete subscription
    # POST   /api/subscriptions/{id}/split/         - Split with friends
    # POST   /api/subscriptions/{id}/check_split/   - Check edited shares
    path('', include(router.urls)),
]
