"""Example: export one month of earnings activities to CSV

Prerequisites:
- Create ~/.uber_earnings_session with the sid/csid cookies from your browser
  (one per line), or point SESSION_FILE below at another file
"""

from datetime import date
from pathlib import Path

from uber_earnings import ServiceFailure, SessionConfig, export_activities

SESSION_FILE = None  # e.g. Path("cookies.txt")
OUTPUT = Path("earnings_2024-01.csv")

session = SessionConfig(session_file=SESSION_FILE).read_session()

print(f"Exporting activities to {OUTPUT}...")
with OUTPUT.open("w", encoding="utf-8", newline="") as fh:
    try:
        count = export_activities(session, date(2024, 1, 1), date(2024, 1, 31), fh)
        print(f"[OK] Wrote {count} activities")
    except ServiceFailure as e:
        print(f"[ERROR] Service reported: {e.message} (partial output kept)")
