# app/customers/views.py
from rest_framework import status
from rest_framework.views import APIView

from app.common.exceptions import ValidationError
from app.common.responses import ok

from .serializers import CustomerIntakeSerializer
from .services import create_player_profile


class CustomerIntakeView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        serializer = CustomerIntakeSerializer(data=request.data)
        if not serializer.is_valid():
            raise ValidationError(
                "Please check the highlighted fields and try again.",
                fields=serializer.errors,
            )

        customer = create_player_profile(serializer.validated_data)
        return ok(
            {"customerId": customer.id, "phoneVerified": customer.phone_verified},
            http_status=status.HTTP_201_CREATED,
        )
