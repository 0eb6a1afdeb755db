"""
Kiosk Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("kiosk/availability", views.kiosk_availability_view),
]
