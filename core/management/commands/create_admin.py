"""
Django management command to create an admin principal.

Admins cannot sign up through the API; this command is the only way
to create one.
"""

import logging

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError

from accounts.application.handlers.sign_up_handler import MIN_SECRET_LENGTH
from accounts.domain.principal import Principal
from accounts.infrastructure.repositories.django_credential_store import (
    DjangoCredentialStore,
)
from core.domain.exceptions import ConflictError
from core.domain.value_objects import Role

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to create an admin principal."""

    help = "Create an admin account for the back-office"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("--email", type=str, required=True, help="Admin login email")
        parser.add_argument("--password", type=str, required=True, help="Admin password")
        parser.add_argument(
            "--full-name",
            type=str,
            default=None,
            help="Display name (default: derived from the email)",
        )
        parser.add_argument("--phone", type=str, default=None, help="Phone number")

    def handle(self, *args, **options):
        """Execute the command."""
        if len(options["password"]) < MIN_SECRET_LENGTH:
            raise CommandError(f"Password must be at least {MIN_SECRET_LENGTH} characters")

        try:
            principal = async_to_sync(self.create_admin)(options)
        except (ConflictError, ValueError) as e:
            raise CommandError(str(e)) from e

        logger.info("Admin account created", extra={"principal_id": str(principal.id)})
        # pylint: disable=no-member
        self.stdout.write(
            self.style.SUCCESS(f"Created admin: {principal.email} ({principal.id})")
        )

    async def create_admin(self, options) -> Principal:
        """Hash the secret and store the admin principal."""
        store = DjangoCredentialStore()
        if await store.find_by_email(options["email"]):
            raise ConflictError(f"An account with email {options['email']} already exists")

        principal = Principal.create(
            email=options["email"],
            secret_hash=await store.hash_secret(options["password"]),
            role=Role.ADMIN,
            full_name=options["full_name"],
            phone=options["phone"],
        )
        return await store.create(principal)
