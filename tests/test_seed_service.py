import copy

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure

from jobboard_seed.core.auth import verify_password
from jobboard_seed.core.exceptions import SeedOperationError, FixtureIntegrityError
from jobboard_seed.services import fixtures
from jobboard_seed.services.seed_service import FixtureLoader


def _counts(db):
    return {name: db[name].count_documents({}) for name in ('users', 'companies', 'jobs', 'applications')}


def test_run_inserts_documented_counts(db, loader):
    result = loader.run()
    assert _counts(db) == {'users': 6, 'companies': 3, 'jobs': 6, 'applications': 7}
    assert result.counts == _counts(db)


def test_users_have_expected_roles(db, loader):
    loader.run()
    assert db.users.count_documents({'role': 'student'}) == 4
    assert db.users.count_documents({'role': 'recruiter'}) == 2


def test_references_point_at_ids_from_same_run(db, loader):
    result = loader.run()
    user_ids = set(result.user_ids.values())
    company_ids = set(result.company_ids.values())
    job_ids = set(result.job_ids.values())

    assert {u['_id'] for u in db.users.find()} == user_ids
    for company in db.companies.find():
        assert company['userId'] in user_ids
    for job in db.jobs.find():
        assert job['company'] in company_ids
        assert job['created_by'] in user_ids
    for application in db.applications.find():
        assert application['job'] in job_ids
        assert application['applicant'] in user_ids


def test_company_owners_and_job_creators(db, loader):
    result = loader.run()
    clara = result.user_ids['clara']
    david = result.user_ids['david']

    assert db.companies.find_one({'name': 'Tech Corp'})['userId'] == clara
    assert db.companies.find_one({'name': 'Startup Hub'})['userId'] == david
    assert db.companies.find_one({'name': 'Cloud Nine'})['userId'] == clara

    for job in db.jobs.find():
        owner = db.companies.find_one({'_id': job['company']})['userId']
        assert job['created_by'] == owner


def test_applications_pair_students_with_jobs(db, loader):
    result = loader.run()
    alice = result.user_ids['alice']
    alice_apps = {a['job']: a['status'] for a in db.applications.find({'applicant': alice})}
    assert alice_apps == {
        result.job_ids['fe_dev']: 'pending',
        result.job_ids['uiux']: 'accepted',
    }
    statuses = sorted(a['status'] for a in db.applications.find())
    assert statuses == ['accepted'] + ['pending'] * 5 + ['rejected']

    students = {u['_id'] for u in db.users.find({'role': 'student'})}
    for application in db.applications.find():
        assert application['applicant'] in students


def test_numeric_fields_stored_as_numbers(db, loader):
    loader.run()
    fe = db.jobs.find_one({'title': 'Frontend Developer'})
    assert fe['salary'] == 90000 and isinstance(fe['salary'], int)
    assert fe['experienceLevel'] == 2
    assert fe['position'] == 3
    assert fe['jobType'] == 'Full-time'
    assert fe['requirements'] == ['React', 'Vite', 'Tailwind', 'JavaScript']
    alice = db.users.find_one({'email': 'alice@student.com'})
    assert alice['phoneNumber'] == 9876543210


def test_documents_use_app_field_names(db, loader):
    loader.run()
    assert set(db.users.find_one()) == {'_id', 'fullname', 'email', 'phoneNumber', 'password', 'role'}
    assert set(db.companies.find_one()) == {'_id', 'name', 'description', 'website', 'location', 'userId'}
    assert set(db.jobs.find_one()) == {
        '_id', 'title', 'description', 'requirements', 'salary', 'experienceLevel',
        'location', 'jobType', 'position', 'company', 'created_by'
    }
    assert set(db.applications.find_one()) == {'_id', 'job', 'applicant', 'status'}


def test_all_users_share_one_hash(db, loader):
    loader.run()
    hashes = {u['password'] for u in db.users.find()}
    assert len(hashes) == 1
    hashed = hashes.pop()
    assert hashed != '123456'
    assert hashed.startswith('$2')
    assert verify_password('123456', hashed)
    assert not verify_password('wrong', hashed)


def _snapshot(db, result):
    """Documents with ObjectIds replaced by fixture keys (and no password hash)."""
    labels = {}
    for ids in (result.user_ids, result.company_ids, result.job_ids):
        labels.update({_id: key for key, _id in ids.items()})

    def relabel(doc):
        out = {}
        for field, value in doc.items():
            if field in ('_id', 'password'):
                continue
            out[field] = labels.get(value, value) if isinstance(value, ObjectId) else value
        return out

    return {
        name: sorted((relabel(d) for d in db[name].find()), key=repr)
        for name in ('users', 'companies', 'jobs', 'applications')
    }


def test_second_run_replaces_everything(db, loader):
    first = loader.run()
    before = _snapshot(db, first)

    second = FixtureLoader(db, verbose=False).run()
    after = _snapshot(db, second)

    assert before == after
    assert _counts(db) == {'users': 6, 'companies': 3, 'jobs': 6, 'applications': 7}
    assert set(first.user_ids.values()).isdisjoint(second.user_ids.values())


def test_clear_removes_existing_documents(db, loader):
    db.users.insert_one({'fullname': 'Old User', 'email': 'old@example.com'})
    db.jobs.insert_many([{'title': 'Stale job'}, {'title': 'Another stale job'}])

    deleted = loader.clear()

    assert deleted == {'applications': 0, 'jobs': 2, 'companies': 0, 'users': 1}
    assert _counts(db) == {'users': 0, 'companies': 0, 'jobs': 0, 'applications': 0}


def test_job_insert_failure_keeps_earlier_collections(db, loader, monkeypatch):
    def boom(*args, **kwargs):
        raise OperationFailure('simulated write failure')

    monkeypatch.setattr(loader.collections['jobs'], 'insert_many', boom)

    with pytest.raises(SeedOperationError) as exc:
        loader.run()

    assert exc.value.step == 'jobs'
    assert isinstance(exc.value.__cause__, OperationFailure)
    assert _counts(db) == {'users': 6, 'companies': 3, 'jobs': 0, 'applications': 0}


def test_duplicate_email_fails_users_step(db):
    users = copy.deepcopy(fixtures.USERS)
    users[1]['email'] = users[0]['email']
    loader = FixtureLoader(db, users=users, verbose=False)

    with pytest.raises(SeedOperationError) as exc:
        loader.run()

    assert exc.value.step == 'users'
    assert db.companies.count_documents({}) == 0


def test_job_creator_must_own_company(db):
    jobs = copy.deepcopy(fixtures.JOBS)
    # Startup Hub belongs to David
    jobs[1]['created_by'] = 'clara'
    loader = FixtureLoader(db, jobs=jobs, verbose=False)

    with pytest.raises(FixtureIntegrityError) as exc:
        loader.run()

    assert exc.value.step == 'jobs'
    assert db.companies.count_documents({}) == 3
    assert db.jobs.count_documents({}) == 0


def test_company_owner_must_be_recruiter(db):
    companies = copy.deepcopy(fixtures.COMPANIES)
    companies[0]['owner'] = 'alice'
    loader = FixtureLoader(db, companies=companies, verbose=False)

    with pytest.raises(FixtureIntegrityError, match="must be a recruiter"):
        loader.run()
    assert db.companies.count_documents({}) == 0


def test_applicant_must_be_student(db):
    applications = copy.deepcopy(fixtures.APPLICATIONS)
    applications[0]['applicant'] = 'david'
    loader = FixtureLoader(db, applications=applications, verbose=False)

    with pytest.raises(FixtureIntegrityError, match="must be a student"):
        loader.run()
    assert db.jobs.count_documents({}) == 6
    assert db.applications.count_documents({}) == 0


def test_unknown_job_reference(db):
    applications = [{'job': 'no_such_job', 'applicant': 'alice', 'status': 'pending'}]
    loader = FixtureLoader(db, applications=applications, verbose=False)

    with pytest.raises(FixtureIntegrityError, match="Unknown job 'no_such_job'"):
        loader.run()


def test_invalid_job_document_is_rejected(db):
    jobs = copy.deepcopy(fixtures.JOBS)
    jobs[0]['salary'] = -1
    loader = FixtureLoader(db, jobs=jobs, verbose=False)

    with pytest.raises(SeedOperationError) as exc:
        loader.run()
    assert exc.value.step == 'jobs'
    assert 'JobDocument' in str(exc.value)


def test_invalid_status_is_rejected(db):
    applications = [{'job': 'fe_dev', 'applicant': 'alice', 'status': 'shortlisted'}]
    loader = FixtureLoader(db, applications=applications, verbose=False)

    with pytest.raises(SeedOperationError):
        loader.run()


def test_progress_lines(db, capsys):
    FixtureLoader(db).run()
    out = capsys.readouterr().out
    for line in ('Old data removed', 'Users inserted', 'Companies inserted',
                 'Jobs inserted', 'Applications inserted'):
        assert line in out
