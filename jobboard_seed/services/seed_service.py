"""
Seed Service - wipes and refills the job-board collections with demo data.

ORDER MATTERS:
1. Clear applications, jobs, companies, users
2. Insert users          -> user ids
3. Insert companies      -> needs recruiter ids
4. Insert jobs           -> needs company + creator ids
5. Insert applications   -> needs job + student ids

Each step returns the ids the next one needs. There is no transaction:
if step 4 fails, the users and companies from steps 2-3 stay in the database.
"""

from typing import Optional, List, Dict
from bson import ObjectId
from pydantic import BaseModel, ConfigDict, ValidationError
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from jobboard_seed.core.auth import hash_password
from jobboard_seed.core.config import get_settings
from jobboard_seed.core.exceptions import SeedOperationError, FixtureIntegrityError
from jobboard_seed.db.mongodb import COLLECTIONS, init_mongo_indexes
from jobboard_seed.schemas.schemas import (
    UserRole,
    UserDocument,
    CompanyDocument,
    JobDocument,
    ApplicationDocument
)
from jobboard_seed.services import fixtures


# Dependents before dependencies
CLEAR_ORDER = ["applications", "jobs", "companies", "users"]


class SeedResult(BaseModel):
    """Ids produced by one seed run, keyed by fixture key."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    user_ids: Dict[str, ObjectId]
    company_ids: Dict[str, ObjectId]
    job_ids: Dict[str, ObjectId]
    application_ids: List[ObjectId]

    @property
    def counts(self) -> Dict[str, int]:
        return {
            "users": len(self.user_ids),
            "companies": len(self.company_ids),
            "jobs": len(self.job_ids),
            "applications": len(self.application_ids)
        }


class FixtureLoader:
    """
    Loads the demo fixture into a database.

    Usage:
        loader = FixtureLoader(db)
        result = loader.run()
        print(result.counts)
    """

    def __init__(
        self,
        db: Database,
        users: Optional[List[dict]] = None,
        companies: Optional[List[dict]] = None,
        jobs: Optional[List[dict]] = None,
        applications: Optional[List[dict]] = None,
        bcrypt_rounds: Optional[int] = None,
        verbose: bool = True
    ):
        settings = get_settings()
        self.db = db
        self.collections: Dict[str, Collection] = {
            name: db[collection] for name, collection in COLLECTIONS.items()
        }

        self.users = fixtures.USERS if users is None else users
        self.companies = fixtures.COMPANIES if companies is None else companies
        self.jobs = fixtures.JOBS if jobs is None else jobs
        self.applications = fixtures.APPLICATIONS if applications is None else applications

        self.password = fixtures.DEMO_PASSWORD
        self.bcrypt_rounds = bcrypt_rounds or settings.bcrypt_rounds
        self.verbose = verbose

        # Lookups for integrity checks (fixture key -> role / owner key)
        self._user_roles = {u["key"]: u["role"] for u in self.users}
        self._company_owners = {c["key"]: c["owner"] for c in self.companies}

    def _log(self, message: str):
        if self.verbose:
            print(message)

    # ============================================================
    # HELPERS
    # ============================================================

    def _resolve(self, ids: Dict[str, ObjectId], key: str, kind: str, step: str) -> ObjectId:
        """Swap a fixture key for the ObjectId inserted earlier in this run."""
        if key not in ids:
            raise FixtureIntegrityError(f"Unknown {kind} '{key}'", step=step)
        return ids[key]

    def _require_role(self, user_key: str, role: UserRole, step: str):
        actual = self._user_roles.get(user_key)
        if actual != role.value:
            raise FixtureIntegrityError(
                f"User '{user_key}' must be a {role.value}, got {actual!r}",
                step=step
            )

    def _build(self, model, step: str, **fields) -> dict:
        """Validate one document against its schema."""
        try:
            return model(**fields).to_document()
        except ValidationError as e:
            raise SeedOperationError(f"Invalid {model.__name__}: {e}", step=step) from e

    def _insert(self, name: str, docs: List[dict], step: str) -> List[ObjectId]:
        """Insert a batch in one call and return the generated ids in order."""
        if not docs:
            return []
        try:
            result = self.collections[name].insert_many(docs)
        except PyMongoError as e:
            raise SeedOperationError(f"Inserting {name} failed: {e}", step=step) from e
        return list(result.inserted_ids)

    # ============================================================
    # STEPS
    # ============================================================

    def clear(self) -> Dict[str, int]:
        """Delete every document in the four collections."""
        deleted = {}
        for name in CLEAR_ORDER:
            try:
                result = self.collections[name].delete_many({})
            except PyMongoError as e:
                raise SeedOperationError(f"Clearing {name} failed: {e}", step="clear") from e
            deleted[name] = result.deleted_count
        self._log("🗑️ Old data removed")
        return deleted

    def seed_users(self) -> Dict[str, ObjectId]:
        """Insert users; all share one bcrypt hash of the demo password."""
        step = "users"
        try:
            password = hash_password(self.password, rounds=self.bcrypt_rounds)
        except ValueError as e:
            raise SeedOperationError(f"Hashing the demo password failed: {e}", step=step) from e

        docs = []
        for user in self.users:
            fields = {k: v for k, v in user.items() if k != "key"}
            docs.append(self._build(UserDocument, step, password=password, **fields))

        try:
            init_mongo_indexes(self.db)
        except PyMongoError as e:
            raise SeedOperationError(f"Creating user indexes failed: {e}", step=step) from e

        ids = self._insert("users", docs, step)
        self._log("👤 Users inserted")
        return {user["key"]: _id for user, _id in zip(self.users, ids)}

    def seed_companies(self, user_ids: Dict[str, ObjectId]) -> Dict[str, ObjectId]:
        """Insert companies, each owned by a recruiter."""
        step = "companies"
        docs = []
        for company in self.companies:
            owner = company["owner"]
            self._require_role(owner, UserRole.recruiter, step)
            docs.append(self._build(
                CompanyDocument, step,
                name=company["name"],
                description=company.get("description", ""),
                website=company.get("website", ""),
                location=company.get("location", ""),
                userId=self._resolve(user_ids, owner, "user", step)
            ))

        ids = self._insert("companies", docs, step)
        self._log("🏢 Companies inserted")
        return {company["key"]: _id for company, _id in zip(self.companies, ids)}

    def seed_jobs(
        self,
        user_ids: Dict[str, ObjectId],
        company_ids: Dict[str, ObjectId]
    ) -> Dict[str, ObjectId]:
        """Insert jobs. The creator must be the recruiter who owns the company."""
        step = "jobs"
        docs = []
        for job in self.jobs:
            company_key = job["company"]
            creator = job["created_by"]
            company_id = self._resolve(company_ids, company_key, "company", step)
            if self._company_owners.get(company_key) != creator:
                raise FixtureIntegrityError(
                    f"Job '{job['key']}' is created by '{creator}' "
                    f"but '{company_key}' is owned by '{self._company_owners.get(company_key)}'",
                    step=step
                )
            fields = {k: v for k, v in job.items() if k not in ("key", "company", "created_by")}
            docs.append(self._build(
                JobDocument, step,
                company=company_id,
                created_by=self._resolve(user_ids, creator, "user", step),
                **fields
            ))

        ids = self._insert("jobs", docs, step)
        self._log("💼 Jobs inserted")
        return {job["key"]: _id for job, _id in zip(self.jobs, ids)}

    def seed_applications(
        self,
        user_ids: Dict[str, ObjectId],
        job_ids: Dict[str, ObjectId]
    ) -> List[ObjectId]:
        """Insert applications from students to jobs."""
        step = "applications"
        docs = []
        for application in self.applications:
            applicant = application["applicant"]
            self._require_role(applicant, UserRole.student, step)
            docs.append(self._build(
                ApplicationDocument, step,
                job=self._resolve(job_ids, application["job"], "job", step),
                applicant=self._resolve(user_ids, applicant, "user", step),
                status=application.get("status", "pending")
            ))

        ids = self._insert("applications", docs, step)
        self._log("📄 Applications inserted")
        return ids

    def run(self) -> SeedResult:
        """
        Clear, then seed all four collections in dependency order.
        Raises SeedOperationError on the first failure; nothing is rolled back.
        """
        self.clear()
        user_ids = self.seed_users()
        company_ids = self.seed_companies(user_ids)
        job_ids = self.seed_jobs(user_ids, company_ids)
        application_ids = self.seed_applications(user_ids, job_ids)
        return SeedResult(
            user_ids=user_ids,
            company_ids=company_ids,
            job_ids=job_ids,
            application_ids=application_ids
        )
