from datetime import date, timedelta
import random

from app.db import SessionLocal
from app.models.client import Client
from app.models.client_goal import ClientGoal
from app.models.measurement import Measurement
from app.api.measurements import refresh_weight_cache

DEMO_COACH_ID = 1


def clear_demo_clients(db) -> None:
    """Delete the demo coach's clients (and their rows) so we can reseed cleanly."""
    ids = [c.id for c in db.query(Client).filter(Client.coach_id == DEMO_COACH_ID)]
    if ids:
        db.query(Measurement).filter(Measurement.client_id.in_(ids)).delete(synchronize_session=False)
        db.query(ClientGoal).filter(ClientGoal.client_id.in_(ids)).delete(synchronize_session=False)
        db.query(Client).filter(Client.id.in_(ids)).delete(synchronize_session=False)
    db.commit()


def seed_demo_clients(db) -> None:
    """Two clients with 12 bi-weekly weigh-ins: one cutting, one bulking."""
    today = date.today()
    roster = [
        # name, start kg, target kg, goal title
        ("Camille", 82.0, 74.0, "Perte de poids"),
        ("Hugo", 68.0, 75.0, "Prise de masse"),
    ]

    for name, start, target, title in roster:
        client = Client(coach_id=DEMO_COACH_ID, name=name, target_weight=target)
        db.add(client)
        db.flush()

        step = (target - start) / 16
        weight = start
        for i in range(12):
            day = today - timedelta(weeks=2 * (11 - i))
            db.add(
                Measurement(
                    client_id=client.id,
                    date=day,
                    weight=round(weight, 1),
                    body_fat=round(random.uniform(14.0, 22.0), 1),
                )
            )
            weight += step + random.uniform(-0.3, 0.3)

        db.add(
            ClientGoal(
                client_id=client.id,
                coach_id=DEMO_COACH_ID,
                title=title,
                target_value=target,
                unit="kg",
                deadline=today + timedelta(weeks=8),
            )
        )
        db.flush()
        refresh_weight_cache(db, client)

    db.commit()
    print(f"Seeded {len(roster)} demo clients")


def main():
    db = SessionLocal()
    try:
        clear_demo_clients(db)
        seed_demo_clients(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
