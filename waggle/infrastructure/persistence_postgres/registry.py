"""SQLAlchemy Mapper Registry.

모든 테이블과 imperative mapping이 공유하는 registry입니다.
"""

from sqlalchemy.orm import registry

mapper_registry = registry()
