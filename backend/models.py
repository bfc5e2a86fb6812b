from sqlalchemy import Column, Integer, String

from database import Base


class Student(Base):
    """
    A student record.

    The id is assigned by the database on first save. Field constraints
    (non-blank names made of letters and spaces, valid email) are enforced
    by services.student_validator before anything is written.
    """
    __tablename__ = 'students'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column('FIRST_NAME', String(255))
    last_name = Column('LAST_NAME', String(255))
    email = Column('EMAIL', String(255))

    def __repr__(self):
        return f"<Student id={self.id} first_name={self.first_name!r} last_name={self.last_name!r}>"
