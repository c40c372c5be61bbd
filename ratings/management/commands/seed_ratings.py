from django.core.management.base import BaseCommand
from django.db import transaction

from recommender.sample_data import SAMPLE_RATINGS
from ratings.models import Rating


class Command(BaseCommand):
    help = "Load the sample user/item ratings into the database."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete every existing rating before seeding.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["clear"]:
            deleted, _ = Rating.objects.all().delete()
            self.stdout.write(f"Deleted {deleted} existing ratings.")

        created_count = 0
        for user, user_ratings in SAMPLE_RATINGS.items():
            for item, score in user_ratings.items():
                _, created = Rating.objects.update_or_create(
                    user=user,
                    item=item,
                    defaults={"score": score},
                )
                if created:
                    created_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {len(SAMPLE_RATINGS)} users ({created_count} new ratings)."
            )
        )
