# services/date_calculator.py
"""
Subscription period arithmetic.

All boundaries are computed against Korea Standard Time (UTC+9) using a fixed
offset, never the host locale. Returned datetimes are timezone-aware UTC.
"""
import random
from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone
from typing import Optional

KST = timezone(timedelta(hours=9), name="KST")

SUBSCRIPTION_DAYS = 30
GRACE_TIME = time(23, 59, 59, 999000)
SCHEDULE_HOUR = 10


@dataclass(frozen=True)
class BillingPeriod:
     start_at: datetime
     end_at: datetime
     end_grace_at: datetime
     next_schedule_at: datetime


def _as_utc(value: datetime) -> datetime:
     if value.tzinfo is None:
          return value.replace(tzinfo=timezone.utc)
     return value.astimezone(timezone.utc)


def calculate_dates(base: Optional[datetime] = None, rng: Optional[random.Random] = None) -> BillingPeriod:
     """
     Compute the billing period that starts at `base` (default: now).

     - end_at: base + 30 days
     - end_grace_at: the KST calendar day of end_at + 1 day, at 23:59:59.999 KST
     - next_schedule_at: that same KST day, at a random minute between 10:00 and 10:59 KST
     """
     start_at = _as_utc(base) if base is not None else datetime.now(timezone.utc)
     end_at = start_at + timedelta(days=SUBSCRIPTION_DAYS)

     # KST calendar day, not the UTC day: differs when end_at is 15:00-24:00 UTC
     next_day = (end_at + timedelta(days=1)).astimezone(KST).date()
     end_grace_at = datetime.combine(next_day, GRACE_TIME, tzinfo=KST)

     minute = (rng or random).randrange(60)
     next_schedule_at = datetime.combine(next_day, time(SCHEDULE_HOUR, minute), tzinfo=KST)

     return BillingPeriod(
          start_at=start_at,
          end_at=end_at,
          end_grace_at=end_grace_at.astimezone(timezone.utc),
          next_schedule_at=next_schedule_at.astimezone(timezone.utc),
     )
