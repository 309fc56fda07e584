"""Command-line entry point for the Campus Portal.

Provides the administrative tasks that have no HTTP surface: creating the
database, bootstrapping the first admin, issuing bearer tokens, seeding demo
users, printing a role dashboard against a running server, and starting the
API server.
"""

import argparse
import logging
import sys
from typing import List, Optional

import config
from core.database import SessionLocal, init_db
from core.exceptions import CampusError
from core.identity import create_access_token
from core.logging_config import setup_logging
from utils.user_manager import UserAlreadyExistsError, UserManager

logger = logging.getLogger(__name__)

# name, email, role, extra fields
DEMO_USERS = [
    ("Admin", "admin@campus.edu", "admin", {"department": "Administration"}),
    ("Prof. Ada Byron", "ada@campus.edu", "professor", {"department": "Computer Science"}),
    ("Sam Student", "sam@campus.edu", "student", {"department": "Computer Science"}),
    ("Robotics Club", "robotics@campus.edu", "club", {"club_name": "Robotics Club"}),
]


def print_banner() -> None:
    """Print program banner."""
    print("=" * 70)
    print("  Campus Portal")
    print("=" * 70)
    print()


def cmd_init_db(args: argparse.Namespace) -> int:
    init_db()
    print(f"Database ready: {config.DATABASE_URL}")
    return 0


def cmd_create_user(args: argparse.Namespace) -> int:
    """Create a user directly in the database (no acting user required)."""
    init_db()
    with SessionLocal() as db:
        try:
            user = UserManager(db).create_user(
                name=args.name,
                email=args.email,
                role=args.role,
                status=args.status,
                department=args.department,
                club_name=args.club_name,
            )
        except UserAlreadyExistsError as e:
            print(f"Error: {e}")
            return 1
        print(f"Created {user.role} {user.name} <{user.email}>")
        print(f"User ID: {user.user_id}")
    return 0


def cmd_issue_token(args: argparse.Namespace) -> int:
    with SessionLocal() as db:
        user = UserManager(db).get_user_by_id(args.user_id)
    if user is None:
        print(f"Error: user {args.user_id} not found")
        return 1
    print(create_access_token(user.user_id))
    return 0


def cmd_seed(args: argparse.Namespace) -> int:
    """Create one demo user per role, skipping those that already exist."""
    init_db()
    with SessionLocal() as db:
        manager = UserManager(db)
        for name, email, role, extra in DEMO_USERS:
            existing = manager.get_user_by_email(email)
            if existing is not None:
                print(f"  exists   {role:<10} {existing.user_id}  {email}")
                continue
            user = manager.create_user(name=name, email=email, role=role, **extra)
            print(f"  created  {role:<10} {user.user_id}  {email}")
    return 0


def cmd_dashboard(args: argparse.Namespace) -> int:
    from client.campus_client import ApiError, CampusClient
    from client.dashboard import load_dashboard, render_dashboard

    with CampusClient(
        base_url=args.base_url,
        user_id=args.user_id,
        role=args.role,
        token=args.token,
    ) as client:
        try:
            dashboard = load_dashboard(client)
        except ApiError as e:
            print(f"Error: {e}")
            return 1
    print(render_dashboard(dashboard))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    print_banner()
    print(f"Serving on http://{args.host}:{args.port} (identity mode: {config.IDENTITY_MODE})")
    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="campus-portal", description="Campus Portal CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="create database tables")
    init_parser.set_defaults(func=cmd_init_db)

    user_parser = subparsers.add_parser("create-user", help="create a user")
    user_parser.add_argument("--name", required=True)
    user_parser.add_argument("--email", required=True)
    user_parser.add_argument("--role", required=True, choices=config.ROLES)
    user_parser.add_argument("--status", default=config.ACTIVE_STATUS, choices=config.USER_STATUSES)
    user_parser.add_argument("--department")
    user_parser.add_argument("--club-name", dest="club_name")
    user_parser.set_defaults(func=cmd_create_user)

    token_parser = subparsers.add_parser("issue-token", help="print a bearer token for a user")
    token_parser.add_argument("user_id")
    token_parser.set_defaults(func=cmd_issue_token)

    seed_parser = subparsers.add_parser("seed", help="create demo users")
    seed_parser.set_defaults(func=cmd_seed)

    dash_parser = subparsers.add_parser("dashboard", help="print a role dashboard")
    dash_parser.add_argument("--user-id", dest="user_id")
    dash_parser.add_argument("--role", choices=config.ROLES)
    dash_parser.add_argument("--token")
    dash_parser.add_argument("--base-url", dest="base_url", default=config.CLIENT_API_URL)
    dash_parser.set_defaults(func=cmd_dashboard)

    serve_parser = subparsers.add_parser("serve", help="run the API server")
    serve_parser.add_argument("--host", default=config.API_HOST)
    serve_parser.add_argument("--port", type=int, default=config.API_PORT)
    serve_parser.add_argument("--reload", action="store_true")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 130
    except CampusError as e:
        logger.error("Command failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
