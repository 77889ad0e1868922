#!/usr/bin/env python3
"""
Startup script for the Programme Eligibility Engine
"""
import subprocess
import sys
from pathlib import Path

def create_env_file():
    """Create .env file if it doesn't exist"""
    env_path = Path(".env")
    if not env_path.exists():
        print("📝 Creating .env file...")

        env_content = """# Application Configuration
APP_NAME=Programme Eligibility Engine
APP_VERSION=1.0.0
DEBUG=true
LOG_LEVEL=INFO

# API Configuration
API_PREFIX=/api/v1
CORS_ORIGINS=http://localhost:3000,http://localhost:8080

# Day boundaries for programme windows
REFERENCE_TIMEZONE=Africa/Dakar
"""

        with open(env_path, 'w') as f:
            f.write(env_content)

        print("✅ .env file created successfully!")
    else:
        print("✅ .env file already exists")

def check_dependencies():
    """Check if required dependencies are installed"""
    print("🔍 Checking dependencies...")

    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        print("✅ All Python dependencies are installed")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        return False

def run_tests():
    """Run the test suite"""
    print("🧪 Running tests...")

    try:
        result = subprocess.run([sys.executable, '-m', 'pytest', '-q'], capture_output=True, text=True)
        if result.returncode == 0:
            print("✅ Tests passed successfully")
            return True
        else:
            print(f"❌ Tests failed:\n{result.stdout}")
            return False
    except Exception as e:
        print(f"❌ Failed to run tests: {e}")
        return False

def start_application():
    """Start the FastAPI application"""
    print("🚀 Starting the application...")

    try:
        subprocess.run([
            sys.executable, '-m', 'uvicorn',
            'programme_eligibility.main:app',
            '--host', '0.0.0.0',
            '--port', '8000',
            '--reload'
        ])
    except KeyboardInterrupt:
        print("\n👋 Application stopped by user")
    except Exception as e:
        print(f"❌ Failed to start application: {e}")

def main():
    """Main startup function"""
    print("🏛️  Programme Eligibility Engine")
    print("=" * 50)

    # Check if we're in the right directory
    if not Path("programme_eligibility").exists():
        print("❌ Please run this script from the repository root")
        sys.exit(1)

    create_env_file()

    if not check_dependencies():
        print("\n📦 Please install dependencies first:")
        print("   pip install -e .[test]")
        sys.exit(1)

    if not run_tests():
        print("\n⚠️  Some tests failed. The engine may not behave correctly.")

    print("\n🎯 System is ready!")
    print("\n📚 Next steps:")
    print("1. Visit http://localhost:8000/docs for API documentation")
    print("2. Check eligibility using the /api/v1/eligibility endpoints")
    print("3. Score questionnaires using the /api/v1/scoring endpoints")

    response = input("\n🚀 Start the application now? (y/n): ").lower().strip()
    if response in ['y', 'yes']:
        start_application()
    else:
        print("\n💡 To start the application later, run:")
        print("   uvicorn programme_eligibility.main:app --reload")

if __name__ == "__main__":
    main()
