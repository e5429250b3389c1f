# app/users/serializers.py
from rest_framework import serializers
from .models import User


class AdminMeSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="id", read_only=True)
    fullName = serializers.CharField(source="full_name", read_only=True)
    lastLogin = serializers.DateTimeField(source="last_login", read_only=True)

    class Meta:
        model = User
        fields = ["userId", "email", "fullName", "role", "lastLogin"]


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=254)
    password = serializers.CharField(max_length=128, trim_whitespace=False)

    def validate_email(self, value):
        return value.strip().lower()
