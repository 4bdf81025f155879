# daily_report/services/credentials.py
from dataclasses import dataclass

from sqlalchemy.orm import Session

from daily_report.core import security
from daily_report.core.enums import Role, ProofMethod
from daily_report.core.errors import UnknownIdentity, Deactivated, InvalidCredentials
from daily_report.core.logger import logger
from daily_report.db import models


@dataclass
class Resolution:
    principal: models.Principal
    proof: ProofMethod

    @property
    def principal_id(self) -> str:
        return self.principal.id

    @property
    def role(self) -> Role:
        return Role(self.principal.role)


def resolve(db: Session, identity: str, secret: str) -> Resolution:
    """
    Decide whether (email, secret) authenticates and which proof matched.

    Order matters: the active flag is checked before any secret comparison so a
    deactivated account never reveals whether the secret was right. The date of
    birth fallback is for employees only.
    """
    principal = db.query(models.Principal).filter(models.Principal.email == identity).first()
    if principal is None:
        logger.info("Login failed for %s: not_found", identity)
        raise UnknownIdentity()

    if not principal.is_active:
        logger.info("Login failed for %s: deactivated", identity)
        raise Deactivated()

    if security.verify_password(secret, principal.hashed_password):
        return Resolution(principal=principal, proof=ProofMethod.PASSWORD)

    if principal.role == Role.EMPLOYEE and principal.date_of_birth:
        # Plain equality on trimmed text; see DESIGN.md open risks
        if secret.strip() == principal.date_of_birth.strip():
            return Resolution(principal=principal, proof=ProofMethod.FALLBACK_SECRET)

    logger.info("Login failed for %s: invalid_credentials", identity)
    raise InvalidCredentials()
