"""Customer DRF serializer for API output.

Renders a ``Customer`` in the public camelCase JSON shape
``{id, firstName, middleName, lastName, emailAddress, phoneNumber}``.
Input is parsed and validated by ``CustomerInputDTO`` instead, so every
field here is read-only.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    middleName = serializers.CharField(
        source="middle_name", read_only=True, allow_null=True
    )
    lastName = serializers.CharField(source="last_name", read_only=True)
    emailAddress = serializers.CharField(source="email_address", read_only=True)
    phoneNumber = serializers.CharField(source="phone_number", read_only=True)

    class Meta:
        model = Customer
        fields = [
            "id",
            "firstName",
            "middleName",
            "lastName",
            "emailAddress",
            "phoneNumber",
        ]
        read_only_fields = ["id"]
