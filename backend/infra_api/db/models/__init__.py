# import all models so Base.metadata knows every table
from infra_api.db.models.project import Project
from infra_api.db.models.company import Company
from infra_api.db.models.assignment import Assignment
