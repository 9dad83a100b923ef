from __future__ import annotations

import uuid

from django.db import models


def generate_id() -> str:
    return str(uuid.uuid4())


class Customer(models.Model):
    id = models.CharField(primary_key=True, max_length=64, default=generate_id, editable=False)
    name = models.CharField(max_length=255)
    email = models.EmailField()
    image_url = models.CharField(max_length=255, blank=True)

    class Meta:
        db_table = "customers"
        ordering = ["name"]

    def __str__(self):
        return self.name


class Invoice(models.Model):
    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        PAID = "paid", "Paid"

    id = models.CharField(primary_key=True, max_length=64, default=generate_id, editable=False)
    customer = models.ForeignKey(Customer, on_delete=models.CASCADE, related_name="invoices")
    # Minor currency units (cents)
    amount = models.IntegerField()
    status = models.CharField(max_length=20, choices=Status.choices, db_index=True)
    date = models.DateField(db_index=True)

    class Meta:
        db_table = "invoices"
        ordering = ["-date"]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gt=0), name="invoice_amount_positive"),
            models.CheckConstraint(condition=models.Q(status__in=["pending", "paid"]), name="invoice_status_valid"),
        ]

    def __str__(self):
        return f"{self.customer.name} - {self.amount / 100:.2f} ({self.status})"


class Revenue(models.Model):
    month = models.CharField(max_length=4, unique=True)
    revenue = models.IntegerField()

    class Meta:
        db_table = "revenue"
        ordering = ["id"]

    def __str__(self):
        return f"{self.month}: {self.revenue}"
