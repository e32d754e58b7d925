# laptopdesk/cli.py
# Commands (the data directory comes from DATA_DIR, default ./data):
# - laptopdesk create-user --username admin --name "Shop Owner" --password "..."
#   Add a login account. Prompts for anything omitted.
# - laptopdesk list-users
#   Show the accounts that can log in.
# - laptopdesk migrate-passwords
#   Hash any user record that still stores a plaintext "password".

import click

from laptopdesk.core.hashing import hash_password, is_password_hash
from laptopdesk.database import get_store
from laptopdesk.schemas.base import new_id, utc_now
from laptopdesk.schemas.user import User
from laptopdesk.store.repositories import UserRepository


@click.group()
def cli():
    """Admin commands for the laptop resale desk."""


@cli.command("create-user")
@click.option("--username", prompt=True)
@click.option("--name", prompt=True)
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
def create_user(username, name, password):
    store = get_store()

    with store.transaction(UserRepository.collection) as txn:
        repo = UserRepository(txn)
        users = repo.get_all()

        if any(u.username == username for u in users):
            raise click.ClickException(f"User '{username}' already exists")

        users.append(
            User(
                id=new_id(),
                username=username,
                name=name,
                password_hash=hash_password(password),
                created_at=utc_now(),
            )
        )
        repo.save(users)

    click.echo(f"Created user '{username}'")


@cli.command("list-users")
def list_users():
    users = UserRepository(get_store()).get_all()

    if not users:
        click.echo("No users")
        return

    for user in users:
        click.echo(f"{user.id}  {user.username}  {user.name}")


@cli.command("migrate-passwords")
def migrate_passwords():
    # Works on raw records: legacy rows do not validate as User yet
    store = get_store()
    migrated = 0

    with store.transaction(UserRepository.collection) as txn:
        records = txn.load(UserRepository.collection)

        for record in records:
            password = record.pop("password", None)

            if password is None:
                continue

            if "passwordHash" not in record:
                record["passwordHash"] = (
                    password if is_password_hash(password) else hash_password(password)
                )
            migrated += 1

        if migrated:
            txn.save(UserRepository.collection, records)

    click.echo(f"Migrated {migrated} user(s)")


if __name__ == "__main__":
    cli()
