"""
Demo data for the job-board app.

Records reference each other by key ("clara", "tech_corp", "fe_dev", ...).
The loader swaps keys for the ObjectIds produced by earlier inserts.
Every account logs in with DEMO_PASSWORD.
"""

# Shared plaintext for all demo accounts (stored only as a bcrypt hash)
DEMO_PASSWORD = "123456"

# ============================================================
# USERS (4 students, 2 recruiters)
# ============================================================

USERS = [
    # Students
    {"key": "alice", "fullname": "Alice Johnson", "email": "alice@student.com", "phoneNumber": 9876543210, "role": "student"},
    {"key": "bob", "fullname": "Bob Smith", "email": "bob@student.com", "phoneNumber": 9123456780, "role": "student"},
    {"key": "eve", "fullname": "Eve Clark", "email": "eve@student.com", "phoneNumber": 9001122334, "role": "student"},
    {"key": "frank", "fullname": "Frank Wright", "email": "frank@student.com", "phoneNumber": 8445566778, "role": "student"},

    # Recruiters
    {"key": "clara", "fullname": "Clara Recruiter", "email": "clara@recruiter.com", "phoneNumber": 9988776655, "role": "recruiter"},
    {"key": "david", "fullname": "David Recruiter", "email": "david@recruiter.com", "phoneNumber": 8899776655, "role": "recruiter"},
]


# ============================================================
# COMPANIES (owner = recruiter key)
# ============================================================

COMPANIES = [
    {
        "key": "tech_corp",
        "name": "Tech Corp",
        "description": "A leading software company",
        "website": "https://techcorp.com",
        "location": "New York, USA",
        "owner": "clara",
    },
    {
        "key": "startup_hub",
        "name": "Startup Hub",
        "description": "An innovative startup accelerator",
        "website": "https://startuphub.com",
        "location": "San Francisco, USA",
        "owner": "david",
    },
    {
        "key": "cloud_nine",
        "name": "Cloud Nine",
        "description": "Cloud-native solutions and services",
        "website": "https://cloudnine.example",
        "location": "Remote",
        "owner": "clara",
    },
]


# ============================================================
# JOBS (salary, experienceLevel, position are numbers)
# ============================================================

JOBS = [
    {
        "key": "fe_dev",
        "title": "Frontend Developer",
        "description": "Build delightful UIs with React, Vite, Tailwind.",
        "requirements": ["React", "Vite", "Tailwind", "JavaScript"],
        "salary": 90000,
        "experienceLevel": 2,
        "location": "Remote",
        "jobType": "Full-time",
        "position": 3,
        "company": "tech_corp",
        "created_by": "clara",
    },
    {
        "key": "be_dev",
        "title": "Backend Developer",
        "description": "Design REST APIs with Node.js, Express, MongoDB.",
        "requirements": ["Node.js", "Express", "MongoDB", "JWT"],
        "salary": 110000,
        "experienceLevel": 3,
        "location": "San Francisco, USA",
        "jobType": "Full-time",
        "position": 2,
        "company": "startup_hub",
        "created_by": "david",
    },
    {
        "key": "uiux",
        "title": "UI/UX Designer",
        "description": "Create user-centered designs and prototypes.",
        "requirements": ["Figma", "Wireframing", "Prototyping"],
        "salary": 80000,
        "experienceLevel": 2,
        "location": "New York, USA",
        "jobType": "Full-time",
        "position": 1,
        "company": "tech_corp",
        "created_by": "clara",
    },
    {
        "key": "devops",
        "title": "DevOps Engineer",
        "description": "CI/CD, Docker, Kubernetes, monitoring and reliability.",
        "requirements": ["Docker", "Kubernetes", "CI/CD", "Linux"],
        "salary": 120000,
        "experienceLevel": 4,
        "location": "Remote",
        "jobType": "Full-time",
        "position": 2,
        "company": "cloud_nine",
        "created_by": "clara",
    },
    {
        "key": "intern",
        "title": "Software Intern",
        "description": "Assist in building features across the stack.",
        "requirements": ["JavaScript", "Git", "Eagerness to learn"],
        "salary": 30000,
        "experienceLevel": 0,
        "location": "Remote",
        "jobType": "Internship",
        "position": 4,
        "company": "startup_hub",
        "created_by": "david",
    },
    {
        "key": "qa_part_time",
        "title": "Part-time QA Tester",
        "description": "Manual testing, bug reporting, basic automation.",
        "requirements": ["Testing", "Jest", "Cypress (nice to have)"],
        "salary": 40000,
        "experienceLevel": 1,
        "location": "Remote",
        "jobType": "Part-time",
        "position": 2,
        "company": "cloud_nine",
        "created_by": "clara",
    },
]


# ============================================================
# APPLICATIONS (job key + student key)
# ============================================================

APPLICATIONS = [
    # Alice applies to FE + UI/UX
    {"job": "fe_dev", "applicant": "alice", "status": "pending"},
    {"job": "uiux", "applicant": "alice", "status": "accepted"},

    # Bob applies to BE + DevOps
    {"job": "be_dev", "applicant": "bob", "status": "pending"},
    {"job": "devops", "applicant": "bob", "status": "rejected"},

    # Eve applies to Intern + QA
    {"job": "intern", "applicant": "eve", "status": "pending"},
    {"job": "qa_part_time", "applicant": "eve", "status": "pending"},

    # Frank applies to FE
    {"job": "fe_dev", "applicant": "frank", "status": "pending"},
]
