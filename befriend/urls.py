"""
URL configuration for befriend project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from friends import views

urlpatterns = [
    path('admin/', admin.site.urls),
    path('accounts/', include('allauth.urls')),
    path('', views.home, name='home'),
    path('dashboard/', views.dashboard, name='dashboard'),
    path('friendships/', views.create_friendship, name='friendships'),
    path('friendships/<int:pk>/', views.FriendshipView.as_view(), name='friendship'),
]
