import logging
from datetime import date

from django.core.management.base import BaseCommand
from django.db import transaction

from dashboard.cache import CUSTOMERS_PATH, DASHBOARD_PATH, INVOICES_PATH, view_cache
from dashboard.models import Customer, Invoice, Revenue

logger = logging.getLogger(__name__)

CUSTOMERS = [
    ("d6e15727-9fe1-4961-8c5b-ea44a9bd81aa", "Evil Rabbit", "evil@rabbit.com", ""),
    ("3958dc9e-712f-4377-85e9-fec4b6a6442a", "Delba de Oliveira", "delba@oliveira.com", ""),
    ("3958dc9e-742f-4377-85e9-fec4b6a6442a", "Lee Robinson", "lee@robinson.com", ""),
    ("76d65c26-f784-44a2-ac19-586678f7c2f2", "Michael Novotny", "michael@novotny.com", ""),
    ("cc27c14a-0acf-4f4a-a6c9-d45682c144b9", "Amy Burns", "amy@burns.com", ""),
    ("13d07535-c59e-4157-a011-f8d2ef4e0cbb", "Balazs Orban", "balazs@orban.com", ""),
]

# (customer index, amount in cents, status, date)
INVOICES = [
    (0, 15795, "pending", date(2022, 12, 6)),
    (1, 20348, "pending", date(2022, 11, 14)),
    (4, 3040, "paid", date(2022, 10, 29)),
    (3, 44800, "paid", date(2023, 9, 10)),
    (5, 34577, "pending", date(2023, 8, 5)),
    (2, 54246, "pending", date(2023, 7, 16)),
    (0, 666, "pending", date(2023, 6, 27)),
    (3, 32545, "paid", date(2023, 6, 9)),
    (4, 1250, "paid", date(2023, 6, 17)),
    (5, 8546, "paid", date(2023, 6, 7)),
    (1, 500, "paid", date(2023, 8, 19)),
    (5, 8945, "paid", date(2023, 6, 3)),
    (2, 1000, "paid", date(2022, 6, 5)),
]

REVENUE = [
    ("Jan", 2000), ("Feb", 1800), ("Mar", 2200), ("Apr", 2500),
    ("May", 2300), ("Jun", 3200), ("Jul", 3500), ("Aug", 3700),
    ("Sep", 2500), ("Oct", 2800), ("Nov", 3000), ("Dec", 4800),
]


class Command(BaseCommand):
    help = "Load placeholder customers, invoices and revenue into the dashboard tables"

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Delete existing invoices, customers and revenue before seeding.',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['reset']:
            Invoice.objects.all().delete()
            Customer.objects.all().delete()
            Revenue.objects.all().delete()
            self.stdout.write(self.style.WARNING("Existing dashboard data deleted."))

        customers = []
        for customer_id, name, email, image_url in CUSTOMERS:
            customer, _ = Customer.objects.update_or_create(
                id=customer_id,
                defaults={'name': name, 'email': email, 'image_url': image_url},
            )
            customers.append(customer)

        created_invoices = 0
        for customer_index, amount, status, invoice_date in INVOICES:
            _, created = Invoice.objects.get_or_create(
                customer=customers[customer_index],
                amount=amount,
                status=status,
                date=invoice_date,
            )
            created_invoices += int(created)

        for month, revenue in REVENUE:
            Revenue.objects.update_or_create(month=month, defaults={'revenue': revenue})

        transaction.on_commit(self._revalidate)

        logger.info(f"Seeded {len(customers)} customers, {created_invoices} new invoices")
        self.stdout.write(self.style.SUCCESS(
            f"Seeding complete: {len(customers)} customers, "
            f"{created_invoices} new invoices, {len(REVENUE)} revenue months"
        ))

    @staticmethod
    def _revalidate():
        for path in (DASHBOARD_PATH, INVOICES_PATH, CUSTOMERS_PATH):
            view_cache.revalidate_path(path)
