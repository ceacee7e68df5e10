"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from ipweather.commands import get_weather
from ipweather.errors import WeatherFetchError


class Command(BaseCommand):
    help = "Fetch live weather for the location this host's address resolves to"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--text", action="store_true", help="Print a one-line summary instead of JSON")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            data = get_weather()
        except WeatherFetchError as exc:
            raise CommandError(str(exc)) from exc

        if options.get("text"):
            self.stdout.write(data.as_text())
        else:
            self.stdout.write(json.dumps(data.as_dict(), ensure_ascii=False))
