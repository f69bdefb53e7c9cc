#!/usr/bin/env python
"""
Development environment setup script for Restock.
Installs the project, writes a .env file, creates the tables and
optionally loads demo data.
"""
import os
import sys
import subprocess
from pathlib import Path

project_root = Path(__file__).parent.parent

ENV_TEMPLATE = """DEBUG=True
SECRET_KEY={secret_key}
ALLOWED_HOSTS=localhost,127.0.0.1
DATABASE_URL=sqlite:///{db_path}
CELERY_BROKER_URL=redis://localhost:6379/0
CELERY_RESULT_BACKEND=redis://localhost:6379/0
"""


def run_command(command, description="", check=True):
    """Run a command, exiting on failure when ``check`` is set."""
    print(f"\n{'='*60}")
    print(f"Running: {description or command}")
    print(f"{'='*60}")

    result = subprocess.run(command, shell=True, capture_output=False)

    if check and result.returncode != 0:
        print(f"\n❌ Command failed: {command}")
        sys.exit(1)
    elif result.returncode == 0:
        print(f"\n✅ Command succeeded: {description or command}")

    return result.returncode == 0


def check_python_version():
    print("🐍 Checking Python version...")

    version = sys.version_info
    if version >= (3, 10):
        print(f"✅ Python {version.major}.{version.minor}.{version.micro} is compatible")
        return True
    print(f"❌ Python {version.major}.{version.minor}.{version.micro} is not compatible")
    print("This project requires Python 3.10 or higher")
    return False


def install_python_dependencies():
    """Install the project in editable mode with dev and test extras."""
    print("📦 Installing Python dependencies...")

    run_command(f"{sys.executable} -m pip install --upgrade pip", "Upgrading pip")
    return run_command(f'{sys.executable} -m pip install -e ".[dev,test]"', "Installing Restock")


def setup_environment_file():
    print("⚙️ Setting up environment configuration...")

    env_file = project_root / ".env"
    if env_file.exists():
        print(".env file already exists")
        return True

    from django.core.management.utils import get_random_secret_key

    env_file.write_text(ENV_TEMPLATE.format(
        secret_key=get_random_secret_key(),
        db_path=project_root / "db.sqlite3",
    ))
    print("✅ Created .env with a new SECRET_KEY")
    return True


def setup_database():
    """Create tables straight from the models."""
    print("🗄️ Setting up database...")

    return run_command(
        f"{sys.executable} manage.py migrate --run-syncdb",
        "Creating database tables"
    )


def load_demo_data():
    print("📊 Loading demo data...")

    run_command(f"{sys.executable} manage.py seed_data", "Loading demo data")


def display_success_message():
    print("\n" + "🎉" * 30)
    print("SUCCESS! Development environment setup complete!")
    print("🎉" * 30)

    print("\n📋 NEXT STEPS:")
    print("1. Start the development server:")
    print("   python manage.py runserver")

    print("\n2. Access the application:")
    print("   • Request screen: http://localhost:8000/request/")
    print("   • Admin screen: http://localhost:8000/admin-dashboard/")
    print("   • API Docs: http://localhost:8000/api/docs/")

    print("\n3. Background stock checks (needs Redis):")
    print("   celery -A config.celery worker -B -l info")

    print("\n4. Run tests:")
    print("   python scripts/run_tests.py all")


def main():
    print("🏗️ Restock - Development Setup")
    print("=" * 60)

    os.chdir(project_root)
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

    if not check_python_version():
        sys.exit(1)

    if not install_python_dependencies():
        sys.exit(1)

    if not setup_environment_file():
        sys.exit(1)

    if not setup_database():
        sys.exit(1)

    print("\n❓ Would you like to load demo data? (y/n): ", end="")
    if input().lower().startswith('y'):
        load_demo_data()

    display_success_message()


if __name__ == "__main__":
    main()
