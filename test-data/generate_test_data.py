#!/usr/bin/env python3
"""
Sample log tree generator for the log sync service.

Writes CSV log files dated today, plus files the sync must ignore (other
dates, backup copies, unknown prefixes), so a manual run has something
realistic to ship.
"""

import random
import sys
from datetime import date, datetime, timedelta
from pathlib import Path


class LogTreeGenerator:
    """Generates a sample log directory for log sync testing."""

    def __init__(self, base_dir: str = "test-data/logs", today: date = None):
        """Initialize the generator."""
        self.base_dir = Path(base_dir)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.today = today or date.today()

    def generate_csv_log(self, path: str, rows: int = 100) -> None:
        """Generate a CSV log file with request records."""
        headers = ["timestamp", "level", "method", "path", "status", "duration_ms"]

        file_path = self.base_dir / path
        file_path.parent.mkdir(parents=True, exist_ok=True)

        start = datetime.combine(self.today, datetime.min.time())
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(','.join(headers) + '\n')

            for i in range(rows):
                row_data = [
                    (start + timedelta(seconds=i * 17)).isoformat(),
                    random.choice(['INFO', 'INFO', 'INFO', 'WARNING', 'ERROR']),
                    random.choice(['GET', 'POST', 'PUT', 'DELETE']),
                    random.choice(['/api/users', '/api/orders', '/health', '/login']),
                    str(random.choice([200, 200, 201, 204, 400, 404, 500])),
                    str(random.randint(1, 2500))
                ]
                f.write(','.join(row_data) + '\n')

    def generate_log_tree(self) -> None:
        """Generate today's logs and the files a sync must skip."""
        stamp = self.today.strftime('%Y-%m-%d')
        yesterday = (self.today - timedelta(days=1)).strftime('%Y-%m-%d')

        print(f"Generating sample logs for {stamp}...")

        # Shipped with the sample config
        self.generate_csv_log(f"app-{stamp}.csv", 200)
        self.generate_csv_log(f"app-{stamp}-worker.csv", 50)
        self.generate_csv_log(f"audit-{stamp}.csv", 20)

        # Ignored: wrong date, wrong suffix, unknown prefix
        self.generate_csv_log(f"app-{yesterday}.csv", 200)
        self.generate_csv_log(f"app-{stamp}.csv.bak", 200)
        self.generate_csv_log(f"debug-{stamp}.csv", 10)

        # Nested files keep their relative path in the key
        self.generate_csv_log(f"archive/app-{stamp}.csv", 30)

        print(f"Files generated in: {self.base_dir.absolute()}")


if __name__ == "__main__":
    base_dir = sys.argv[1] if len(sys.argv) > 1 else "test-data/logs"
    LogTreeGenerator(base_dir).generate_log_tree()
