"""
Initialize the PrepMind backend
- Create the .env file from the template
- Create database tables
- Check for the JavaScript sandbox runtime
"""

import os
import shutil
import sys
from pathlib import Path

def check_environment():
    """Check if environment file exists"""
    env_file = Path("backend/.env")
    if not env_file.exists():
        print("📝 Creating .env file from template...")
        example_file = Path("backend/.env.example")
        if example_file.exists():
            shutil.copy(example_file, env_file)
            print("✅ Created backend/.env")
        else:
            print("❌ backend/.env.example not found")
            return False
    else:
        print("✅ backend/.env exists")
    return True

def init_database():
    """Create tables for sessions and profiles"""
    sys.path.insert(0, str(Path("backend").resolve()))
    os.chdir("backend")
    try:
        # Importing the module runs create_all against DATABASE_URL
        from prepmind.models.database import engine
    finally:
        os.chdir("..")
    print(f"✅ Database ready: {engine.url.render_as_string(hide_password=True)}")

def check_sandbox():
    """Coding answers in JavaScript need Node.js on the PATH"""
    from prepmind.config import settings

    if shutil.which(settings.SANDBOX_NODE_BINARY):
        print(f"✅ Found {settings.SANDBOX_NODE_BINARY} for the code sandbox")
    else:
        print(f"⚠️  {settings.SANDBOX_NODE_BINARY} not found; JavaScript execution will be unavailable")

def main():
    """Main initialization function"""
    print("🚀 PrepMind - Python Initialization")
    print("===================================")

    # Change to project root directory
    script_dir = Path(__file__).parent
    project_root = script_dir.parent
    os.chdir(project_root)
    print(f"📁 Working directory: {project_root}")

    if not check_environment():
        sys.exit(1)

    init_database()
    check_sandbox()

    print("\n🎉 Initialization complete!")
    print("\nNext steps:")
    print("1. Add your GEMINI_API_KEY to backend/.env")
    print("2. Install dependencies: pip install -e .[test]")
    print("3. Start the API: uvicorn prepmind.main:app --app-dir backend --reload")

if __name__ == "__main__":
    main()
