"""
Job Board Demo Seeder
Fills the job-board MongoDB with demo accounts, companies, jobs and applications.

Collections written:
- users, companies, jobs, applications
"""

__version__ = "1.0.0"
