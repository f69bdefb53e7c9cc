"""
Django management command to seed the database with demo data.
"""
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction, DatabaseError
from apps.inventory.models import Item, Category
from apps.inventory.services.item_service import ItemService
from apps.requests.models import RestockRequest
from apps.requests.services.request_service import RequestService

DEMO_ITEMS = [
    # Toys
    {'name': 'Building Blocks Set', 'category': Category.TOYS, 'quantity': 24, 'threshold': 5,
     'description': '100-piece wooden block set'},
    {'name': 'Plush Bear', 'category': Category.TOYS, 'quantity': 3, 'threshold': 10},
    {'name': 'Puzzle (48 pieces)', 'category': Category.TOYS, 'quantity': 0, 'threshold': 4},
    {'name': 'Crayons Box', 'category': Category.TOYS, 'quantity': 40, 'threshold': 15,
     'source_url': 'https://example.com/crayons'},

    # Medical supplies
    {'name': 'Adhesive Bandages', 'category': Category.MEDICAL, 'quantity': 200, 'threshold': 50},
    {'name': 'Disposable Gloves (M)', 'category': Category.MEDICAL, 'quantity': 12, 'threshold': 20,
     'description': 'Nitrile, box of 100'},
    {'name': 'Digital Thermometer', 'category': Category.MEDICAL, 'quantity': 0, 'threshold': 2},
    {'name': 'Hand Sanitizer', 'category': Category.MEDICAL, 'quantity': 8, 'threshold': 8},

    # Office supplies
    {'name': 'Printer Paper (ream)', 'category': Category.OFFICE, 'quantity': 30, 'threshold': 10},
    {'name': 'Ballpoint Pens', 'category': Category.OFFICE, 'quantity': 5, 'threshold': 25},
    {'name': 'Stapler', 'category': Category.OFFICE, 'quantity': 6, 'threshold': 2},
    {'name': 'Sticky Notes', 'category': Category.OFFICE, 'quantity': 0, 'threshold': 10,
     'source_url': 'https://example.com/sticky-notes'},
]

DEMO_REQUESTS = [
    ('Digital Thermometer', 3, 'Nurse station is out'),
    ('Ballpoint Pens', 50, ''),
]


class Command(BaseCommand):
    help = 'Seed database with demo items and restock requests'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing items and requests before seeding',
        )
        parser.add_argument(
            '--items-only',
            action='store_true',
            help='Create only items, no requests',
        )

    def handle(self, *args, **options):
        """Handle the seed command."""
        try:
            with transaction.atomic():
                if options['clear']:
                    self.clear_data()

                items = self.create_items()
                if not options['items_only']:
                    self.create_requests(items)

        except DatabaseError as e:
            raise CommandError(f'Error seeding data: {str(e)}')

        self.stdout.write(
            self.style.SUCCESS('Successfully seeded database with demo data!')
        )

    def clear_data(self):
        self.stdout.write('Clearing existing data...')

        RestockRequest.objects.all().delete()
        Item.objects.all().delete()

        self.stdout.write(self.style.WARNING('Existing data cleared.'))

    def create_items(self):
        """Create demo items, skipping names that already exist."""
        self.stdout.write('Creating items...')

        items = {}
        created = 0
        for data in DEMO_ITEMS:
            item = Item.objects.filter(name=data['name']).first()
            if item is None:
                item = ItemService.create_item(data)
                created += 1
            items[item.name] = item

        self.stdout.write(f'Created {created} items ({len(items)} total).')
        return items

    def create_requests(self, items):
        self.stdout.write('Creating restock requests...')

        for name, quantity, notes in DEMO_REQUESTS:
            RequestService.submit_request(items[name].id, quantity, notes)

        self.stdout.write(f'Created {len(DEMO_REQUESTS)} requests.')
