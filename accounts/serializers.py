from django.contrib.auth import authenticate, get_user_model
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Current user's profile. Role and email are managed by admins only."""

    is_venue_staff = serializers.BooleanField(read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "first_name", "last_name", "display_name", "role", "is_venue_staff"]
        read_only_fields = ["id", "email", "role"]


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        account = User.objects.filter(email__iexact=attrs["email"]).only("username").first()
        user = None
        if account is not None:
            user = authenticate(
                request=self.context.get("request"),
                username=account.username,
                password=attrs["password"],
            )
        if user is None:
            raise AuthenticationFailed("Invalid email or password.")
        attrs["user"] = user
        return attrs
