from django.urls import path
from . import views

app_name = 'currency'

urlpatterns = [
    path('convert/', views.convert, name='convert'),
    path('rates/', views.rates, name='rates'),
]
