import logging

from sqlalchemy.orm import Session

from venuebook.db.models import User
from venuebook.core.config import settings
from venuebook.core.security import hash_password

logger = logging.getLogger(__name__)


#Create the configured administrator account if it does not exist yet
def seed_admin(db: Session):
    email = settings.ADMIN_EMAIL.strip().lower()

    existing = db.query(User).filter(User.email == email).first()
    if existing:
        return existing

    admin = User(
        name=settings.ADMIN_NAME,
        email=email,
        hashed_password=hash_password(settings.ADMIN_PASSWORD),
        role="admin",
    )

    db.add(admin)
    db.commit()
    db.refresh(admin)

    logger.info("Seeded admin account %s", email)
    return admin
