"""asttojs URL Configuration

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/stable/topics/http/urls/
"""
from django.urls import path

from atj.views import AstParseViewSet, RegenerateViewSet, ScriptParseViewSet

urlpatterns = [
    path('api/scriptparse', ScriptParseViewSet.as_view(), name='scriptparse'),
    path('api/astparse', AstParseViewSet.as_view(), name='astparse'),
    path('api/regenerate', RegenerateViewSet.as_view(), name='regenerate'),
]
