#!/usr/bin/env python3
"""
Start the LingoPop backend with an environment-specific configuration.

    python run.py --env production --port 9000
    python run.py --create-sample staging
"""

import os
import sys
import argparse

from lingopop.config.loader import ConfigLoader, load_config_for_environment
from lingopop.config.settings import Environment, reload_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LingoPop Backend Server")
    parser.add_argument(
        "--env",
        choices=[e.value for e in Environment],
        default=None,
        help="Configuration to load (default: $ENVIRONMENT or development)",
    )
    parser.add_argument("--host", default=None, help="Bind address")
    parser.add_argument("--port", type=int, default=None, help="Bind port")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument(
        "--list-envs",
        action="store_true",
        help="Show the .env.<environment> files found in the working directory",
    )
    parser.add_argument(
        "--create-sample",
        metavar="ENV",
        help="Write .env.<ENV>.sample with every supported variable",
    )
    return parser


def main():
    args = build_parser().parse_args()

    if args.list_envs:
        envs = ConfigLoader.get_available_environments()
        print("Environment files:" if envs else "No environment files found")
        for env in envs:
            print(f"  - {env}")
        return

    if args.create_sample:
        try:
            path = ConfigLoader.create_sample_env_file(args.create_sample)
        except (ValueError, OSError) as e:
            print(f"✗ Could not write sample configuration: {e}")
            sys.exit(1)
        print(f"✓ Wrote {path}")
        return

    try:
        settings = load_config_for_environment(args.env)
    except Exception as e:
        print(f"✗ Invalid configuration: {e}")
        sys.exit(1)

    # lingopop.main reads the global settings, in this process and in reload/worker children
    os.environ["ENVIRONMENT"] = settings.environment.value
    reload_settings()

    overrides = {
        "host": args.host,
        "port": args.port,
        "workers": args.workers,
        "reload": True if args.reload else None,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(settings, name, value)

    if not settings.gemini.api_key:
        print("⚠ GEMINI_API_KEY is not set; backend calls will fail")

    print(f"🚀 {settings.app_name} v{settings.app_version} ({settings.environment.value})")
    print(f"   Listening on {settings.host}:{settings.port}, workers={settings.workers}, reload={settings.reload}")
    print(f"   Lookup model {settings.gemini.lookup_model}, fallback {settings.gemini.lookup_fallback_model}")
    print(f"   App state file {settings.get_config_path()}")

    import uvicorn

    uvicorn.run(
        "lingopop.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=1 if settings.reload else settings.workers,
        log_level=settings.log_level.value.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
