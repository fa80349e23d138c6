import argparse
import json
import logging
import os
import sys
import uuid as _uuid
from pathlib import Path

from config.settings import get_settings
from pipelines.enrich_leads import run_enrichment
from pipelines.search_leads import run_search
from services.reporting import print_enrichment_summary, print_search_summary
from utils.errors import AppError
from utils.logging_setup import init_logging


def _write_json(data, output):
    if not output:
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return None
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def cmd_search(args):
    outcome = run_search(
        args.designation,
        args.location,
        industry=args.industry,
        lead_count=args.lead_count,
    )
    profiles = [p.to_wire() for p in outcome.profiles]
    path = _write_json({"query": outcome.query, "profiles": profiles, "count": outcome.count}, args.output)
    print_search_summary(outcome.query, profiles, path)


def cmd_enrich(args):
    data = json.loads(Path(args.input).read_text(encoding="utf-8"))
    profiles = data.get("profiles") if isinstance(data, dict) else data
    if not isinstance(profiles, list) or not all(isinstance(p, dict) for p in profiles):
        raise AppError("Input must be a JSON array of profiles or an object with a 'profiles' array", 400)
    outcome = run_enrichment(profiles)
    path = _write_json({"profiles": outcome.profiles, "count": outcome.count, "emailStats": outcome.email_stats}, args.output)
    print_enrichment_summary(outcome.mode, outcome.profiles, path)


def cmd_serve(args):
    import uvicorn

    uvicorn.run("api.app:app", host=args.host, port=args.port, log_level=get_settings().log_level.lower())


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex

    parser = argparse.ArgumentParser(description="LinkedIn lead finder CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_search = sub.add_parser("search", help="Search LinkedIn profiles for a designation in a location")
    p_search.add_argument("--designation", "-d", required=True, help="Job title to search for")
    p_search.add_argument("--location", "-l", required=True, help="Location to search in")
    p_search.add_argument("--industry", "-i", default=None, help="Industry tag (e.g. technology) or 'all'")
    p_search.add_argument("--lead-count", "-n", type=int, default=settings.default_lead_count, help="Results to request from the provider")
    p_search.add_argument("--output", "-o", default=None, help="Write results JSON here instead of stdout")
    p_search.set_defaults(func=cmd_search)

    p_enr = sub.add_parser("enrich", help="Enrich profiles from a search results JSON file")
    p_enr.add_argument("--input", required=True, help="Path to JSON file (array or object with 'profiles')")
    p_enr.add_argument("--output", "-o", default=None, help="Write enriched JSON here instead of stdout")
    p_enr.set_defaults(func=cmd_enrich)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=settings.api_host)
    p_serve.add_argument("--port", type=int, default=settings.api_port)
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args()
    try:
        args.func(args)
    except AppError as e:
        logging.error(e.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
