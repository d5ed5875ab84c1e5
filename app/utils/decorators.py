from functools import wraps
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from app.services.exceptions import StoreUnavailable

def transactional(f):
    """
    Run a service call as one unit of work.

    Commits when the call returns, rolls back when it raises. Domain errors
    propagate unchanged; storage errors surface as StoreUnavailable.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        try:
            result = f(*args, **kwargs)
            db.session.commit()
            return result
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Store failure in {f.__qualname__}: {e}")
            raise StoreUnavailable() from e
        except Exception:
            db.session.rollback()
            raise

    return decorated
