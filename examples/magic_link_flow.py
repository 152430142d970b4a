"""
Magic Link Example - email sign-in against a local SQLite store.
"""

import asyncio
import secrets
from datetime import datetime, timedelta, timezone

from authlink import AdapterSession, AdapterUser, IdentityClient, VerificationToken
from authlink.adapters import build_engine, build_sessionmaker, create_schema
from authlink.config import Settings
from authlink.log import configure_logging


async def main():
    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    configure_logging(settings.log_level)

    engine = build_engine(settings)
    await create_schema(engine)

    async with build_sessionmaker(engine)() as db:
        client = IdentityClient(db, settings=settings)

        # Issue a magic link token
        expires = datetime.now(timezone.utc) + timedelta(minutes=10)
        issued = await client.verification_tokens.create(
            VerificationToken("alice@example.com", secrets.token_urlsafe(32), expires)
        )
        print(f"Token issued for {issued.identifier}")

        # The link is clicked: consume it (a second click gets None)
        consumed = await client.verification_tokens.consume(issued.identifier, issued.token)
        replay = await client.verification_tokens.consume(issued.identifier, issued.token)
        print(f"Consumed: {consumed is not None}, replay accepted: {replay is not None}")

        # Find or create the user behind the email
        user = await client.users.resolve_or_create(
            AdapterUser(email="alice@example.com", name="Alice", email_verified=datetime.now(timezone.utc))
        )
        print(f"Signed in as {user.id}")

        # Start a session
        session = await client.sessions.create(
            AdapterSession(secrets.token_urlsafe(32), user.id, datetime.now(timezone.utc) + timedelta(days=30))
        )
        joined = await client.sessions.get_with_user(session.session_token)
        print(f"Session belongs to {joined.user.email}")

        # Logout
        await client.sessions.delete(session.session_token)
        print(f"Session after logout: {await client.sessions.get_with_user(session.session_token)}")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
