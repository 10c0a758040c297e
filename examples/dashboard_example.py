#!/usr/bin/env python3
"""
Example: deployment overview for one or more Vercel teams.

Requirements:
- VERCEL_TOKEN and VERCEL_TEAM_ID environment variables (or a .env file)
- Optional: VERCEL_TEAM_ID_2 / VERCEL_TOKEN_2 for a second team

Usage:
    python examples/dashboard_example.py
"""

import os

from dotenv import load_dotenv

from vercel_status import Dashboard, DashboardConfig
from vercel_status.render import render_dashboard

load_dotenv()


def main() -> None:
    config = DashboardConfig.from_env(deployments_limit=50)
    if not (config.default_token and config.default_team_id):
        print("Error: VERCEL_TOKEN and VERCEL_TEAM_ID environment variables are required")
        return

    with Dashboard(config) as dashboard:
        second_team = os.getenv("VERCEL_TEAM_ID_2")
        if second_team:
            dashboard.add_team()
            dashboard.update_team(1, "team_id", second_team)
            dashboard.update_team(1, "api_token", os.getenv("VERCEL_TOKEN_2", ""))

        dashboard.load_stars()
        dashboard.refresh()
        for notification in dashboard.pop_notifications():
            print(f"[{notification.title}] {notification.description}")

        print(f"Stars: {dashboard.stars_count}")
        print(render_dashboard(dashboard.state, dashboard.stats(), error=dashboard.error))


if __name__ == "__main__":
    main()
