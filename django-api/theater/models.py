"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class Play(models.Model):
    """Persistence model for the play catalog."""

    class Genre(models.TextChoices):
        TRAGEDY = "tragedy", "Tragedy"
        COMEDY = "comedy", "Comedy"

    play_id = models.SlugField(primary_key=True, max_length=100)
    name = models.CharField(max_length=255)
    genre = models.CharField(max_length=50, choices=Genre.choices)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Invoice(models.Model):
    """Persistence model for customer invoices."""

    customer = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.customer} #{self.pk}"


class Performance(models.Model):
    """Persistence model for invoiced performances.

    play_id is a catalog key, not a foreign key.
    """

    invoice = models.ForeignKey(
        Invoice, on_delete=models.CASCADE, related_name="performances"
    )
    play_id = models.CharField(max_length=100)
    audience = models.PositiveIntegerField()
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position"]
        indexes = [
            models.Index(fields=["invoice", "position"], name="theater_perf_invoice_pos_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.play_id} ({self.audience} seats)"
