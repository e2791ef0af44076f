from cv_analyzer.utils.jobs import filter_jobs_by_type, limit_jobs

JOBS = [
    {"id": "1", "type": "Full-time"},
    {"id": "2", "type": "Contract"},
    {"id": "3", "type": "Full-time"},
]


def test_filter_by_type():
    assert [j["id"] for j in filter_jobs_by_type(JOBS, {"type": "Full-time"})] == ["1", "3"]


def test_all_or_missing_type_keeps_everything():
    assert filter_jobs_by_type(JOBS, {"type": "All"}) == JOBS
    assert filter_jobs_by_type(JOBS, {}) == JOBS
    assert filter_jobs_by_type(JOBS, None) == JOBS


def test_filter_returns_new_list():
    result = filter_jobs_by_type(JOBS, {})
    result.pop()
    assert len(JOBS) == 3


def test_limit_jobs():
    assert [j["id"] for j in limit_jobs(JOBS, 2)] == ["1", "2"]
    assert limit_jobs(JOBS, 10) == JOBS
    assert limit_jobs(JOBS, 0) == JOBS
