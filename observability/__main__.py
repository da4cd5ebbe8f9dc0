"""Phoenix server launcher for observability.

Run with: python -m observability
Or use the script: phoenix-server
"""

import phoenix as px


def main():
    """Launch Phoenix server for tracing the weather widget."""
    print("Starting Phoenix observability server...")
    print("Dashboard will be available at: http://localhost:6006")
    print("Press Ctrl+C to stop the server")

    px.launch_app()


if __name__ == "__main__":
    main()
