from datetime import timedelta

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from app.phone_verifications.services import purge_stale_verifications, stale_verifications


class Command(BaseCommand):
    help = "Delete phone verification records that expired more than the retention window ago."

    def add_arguments(self, parser):
        parser.add_argument(
            "--retention-hours",
            type=int,
            default=settings.OTP_RETENTION_HOURS,
            help="Keep records that expired within this many hours (default: OTP_RETENTION_HOURS)",
        )
        parser.add_argument("--dry-run", action="store_true", help="Only count what would be deleted")

    def handle(self, *args, **options):
        hours = options["retention_hours"]
        if hours < 0:
            raise CommandError("--retention-hours must be >= 0")
        retention = timedelta(hours=hours)

        if options["dry_run"]:
            count = stale_verifications(retention=retention).count()
            self.stdout.write(f"{count} verification(s) would be deleted")
            return

        deleted = purge_stale_verifications(retention=retention)
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} verification(s)"))
