"""Deterministic seed data.

All ids are negative so that rows created through the API never collide with
them. The pedigree around Larry (-10) spans three generations.
"""

import logging
from datetime import date

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Horse, Image, Owner, Sex

logger = logging.getLogger(__name__)

OWNERS = [
    (-1, "Valentino", "Lazarevic"),
    (-2, "Alexandra", "Ladislai"),
    (-3, "Karlo", "Peranovic"),
    (-4, "Philipp", "Maurer"),
    (-5, "Jan Guenther", "Giefing"),
    (-6, "Leonardo", "Lazarevic"),
    (-7, "Lukas", "Reif"),
    (-8, "Pamela", "Lazarevic"),
    (-9, "Predrag", "Lazarevic"),
    (-10, "Max", "Mustermann"),
]

# id, name, description, date of birth, sex, owner, mother, father
HORSES = [
    (-1, "Wendy", "The famous one!", date(2005, 3, 12), Sex.FEMALE, -1, None, None),
    (-2, "Lucky", "Never lost a race", date(2004, 6, 1), Sex.MALE, -2, None, None),
    (-3, "Daisy", None, date(2006, 4, 20), Sex.FEMALE, -3, None, None),
    (-4, "Thunder", "Loud and fast", date(2005, 9, 9), Sex.MALE, None, None, None),
    (-5, "Storm", None, date(2012, 5, 5), Sex.MALE, -4, -3, -4),
    (-6, "Linda", "Calm mare", date(2010, 2, 14), Sex.FEMALE, -1, -1, -2),
    (-7, "Steve", None, date(2011, 7, 30), Sex.MALE, -6, -1, -2),
    (-8, "Rosie", "Loves apples", date(2013, 8, 8), Sex.FEMALE, -8, -3, -4),
    (-9, "Max", None, date(2014, 1, 1), Sex.MALE, -10, None, None),
    (-10, "Larry", "Wendy's grandson", date(2016, 5, 22), Sex.MALE, -9, -6, -7),
    (-11, "Blaze", None, date(2017, 3, 3), Sex.MALE, -7, -8, -5),
    (-12, "Luna", "Night runner", date(2018, 4, 4), Sex.FEMALE, -8, -6, -9),
    (-13, "Willow", None, date(2019, 6, 6), Sex.FEMALE, -5, -12, -11),
    (-14, "Bella", "Youngest mare", date(2020, 9, 10), Sex.FEMALE, None, -12, -10),
    (-15, "Shadow", None, date(2021, 10, 10), Sex.MALE, -10, -13, -10),
]


async def clear(session: AsyncSession) -> None:
    """Remove every horse, owner and image."""
    await session.execute(delete(Horse))
    await session.execute(delete(Image))
    await session.execute(delete(Owner))
    await session.flush()


async def seed(session: AsyncSession) -> None:
    """Replace the store content with the seed dataset."""
    logger.info("Loading seed data: %d owners, %d horses", len(OWNERS), len(HORSES))
    await clear(session)
    for id, first_name, last_name in OWNERS:
        session.add(Owner(id=id, first_name=first_name, last_name=last_name))
    await session.flush()

    # parents are listed before their children
    for id, name, description, born, sex, owner_id, mother_id, father_id in HORSES:
        session.add(
            Horse(
                id=id,
                name=name,
                description=description,
                date_of_birth=born,
                sex=sex,
                owner_id=owner_id,
                mother_id=mother_id,
                father_id=father_id,
            )
        )
    await session.flush()
