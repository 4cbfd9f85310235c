"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.conf import settings
from django.db import models


class Enrollment(models.Model):
    """Persistence model for a user's enrollment."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrollment"
    )
    name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=11, unique=True)
    birthday = models.DateTimeField()
    phone = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class TicketType(models.Model):
    """Persistence model for ticket types."""

    name = models.CharField(max_length=100)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    is_remote = models.BooleanField(default=False)
    includes_hotel = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class Ticket(models.Model):
    """Persistence model for tickets."""

    class Status(models.TextChoices):
        RESERVED = "RESERVED"
        PAID = "PAID"

    enrollment = models.OneToOneField(
        Enrollment, on_delete=models.CASCADE, related_name="ticket"
    )
    ticket_type = models.ForeignKey(
        TicketType, on_delete=models.PROTECT, related_name="tickets"
    )
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.RESERVED
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.enrollment} - {self.status}"


class Hotel(models.Model):
    """Persistence model for hotels."""

    name = models.CharField(max_length=255)
    image = models.URLField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class Room(models.Model):
    """Persistence model for hotel rooms."""

    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="rooms")
    name = models.CharField(max_length=255)
    capacity = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.hotel.name} - {self.name}"
