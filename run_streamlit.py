"""
Launcher script for the YouTube Summary AI Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def build_command(app_path: Path, port: int) -> list:
    """Streamlit command line for the UI."""
    return [
        "streamlit", "run", str(app_path),
        "--server.port", str(port),
        "--server.headless", "true",
        "--browser.serverAddress", "localhost",
        "--browser.gatherUsageStats", "false",
    ]


def main():
    """Launch the Streamlit app with command line options."""
    parser = argparse.ArgumentParser(description="YouTube Summary AI Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--server-port", type=int, default=8000, help="Port where the FastAPI server is running")
    parser.add_argument("--api-url", help="URL of the API server (default: http://localhost:<server-port>)")
    args = parser.parse_args()

    app_dir = Path(__file__).parent.absolute()
    app_path = app_dir / "app" / "frontend" / "streamlit_app.py"

    env = os.environ.copy()
    api_url = args.api_url or f"http://localhost:{args.server_port}"
    env["API_URL"] = api_url

    # The UI imports the app package, so the project root must be importable
    env["PYTHONPATH"] = str(app_dir) + os.pathsep + env.get("PYTHONPATH", "")

    print(f"Starting YouTube Summary AI Streamlit app on port {args.port}")
    print(f"API server is expected to be running at: {api_url}")

    try:
        subprocess.run(build_command(app_path, args.port), env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except Exception as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
