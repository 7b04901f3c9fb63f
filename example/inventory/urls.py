from django.urls import path

from . import views

urlpatterns = [
    path("stock/", views.stock, name="stock"),
    path("add/", views.add, name="add"),
    path("remove/<int:count>/", views.remove, name="remove"),
]
