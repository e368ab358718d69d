from django.core.management.base import BaseCommand

from games.seed_utils import ensure_seed_puzzles


class Command(BaseCommand):
    help = "Seed a demo ordering puzzle and a few sliding puzzles if their tables are empty."

    def handle(self, *args, **options):
        # Idempotent: tables that already hold rows are left alone.
        games_added, sliding_added = ensure_seed_puzzles()
        if not games_added and not sliding_added:
            self.stdout.write(self.style.WARNING("Puzzles already present. No action taken."))
            return
        self.stdout.write(self.style.SUCCESS(
            f"Seeded {games_added} rank order game(s) and {sliding_added} sliding puzzle(s)."
        ))
