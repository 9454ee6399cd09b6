"""
Staffgate Navigation - Role Catalog Templates
=============================================
Dashboard menus per issuer role, used to seed the navigation catalog.
Module keys are role-prefixed at seed time.
"""

from __future__ import annotations

from staffgate.permissions.constants import ROLE_ADMIN, ROLE_CLINIC, ROLE_DOCTOR

_STAFF_MANAGEMENT_CHILDREN = (
    ("Dashboard", "staff-dashboard"),
    ("Add Service", "add-service"),
    ("Patient Registration", "patient-registration"),
    ("Patient Information", "patient-information"),
    ("Add EOD Task", "eodNotes"),
    ("Add Expense", "AddPettyCashForm"),
    ("Add Vendor", "add-vendor"),
    ("Membership", "membership"),
    ("All Contracts", "contract"),
)


def _staff_management_children(namespace: str) -> list[dict]:
    return [
        {"label": label, "path": f"/{namespace}/{slug}", "order": index}
        for index, (label, slug) in enumerate(_STAFF_MANAGEMENT_CHILDREN, start=1)
    ]


def _lead_children(namespace: str) -> list[dict]:
    return [
        {"label": "Dashboard", "path": f"/{namespace}/lead/dashboard", "order": 1},
        {"label": "Create Lead", "path": f"/{namespace}/lead/create-lead", "order": 2},
        {"label": "Assign Lead", "path": f"/{namespace}/lead/assign-lead", "order": 3},
        {"label": "Create Offer", "path": f"/{namespace}/lead/create-offer", "order": 4},
        {"label": "Create Agent", "path": f"/{namespace}/lead/create-agent", "order": 5},
        {"label": "Permission", "path": f"/{namespace}/lead/permission", "order": 6},
    ]


def _marketing_children(namespace: str) -> list[dict]:
    return [
        {"label": "SMS Marketing", "path": f"/{namespace}/marketing/sms-marketing", "order": 1},
        {"label": "WhatsApp Marketing", "path": f"/{namespace}/marketing/whatsapp-marketing", "order": 2},
        {"label": "Gmail Marketing", "path": f"/{namespace}/marketing/gmail-marketing", "order": 3},
    ]


ADMIN_NAVIGATION_TEMPLATES = (
    {
        "label": "Dashboard",
        "path": "/admin/dashboard-admin",
        "icon": "🏠",
        "description": "Overview & analytics",
        "moduleKey": "dashboard",
        "order": 1,
    },
    {
        "label": "Approval Clinic",
        "path": "/admin/AdminClinicApproval",
        "icon": "✅",
        "description": "Manage Clinics",
        "moduleKey": "approval_clinic",
        "order": 2,
    },
    {
        "label": "Approval Doctors",
        "path": "/admin/approve-doctors",
        "icon": "🏥",
        "description": "Manage Doctors",
        "moduleKey": "approval_doctors",
        "order": 3,
    },
    {
        "label": "Add Treatment",
        "path": "/admin/add-treatment",
        "icon": "📝",
        "description": "Add new Treatment",
        "moduleKey": "add_treatment",
        "order": 4,
    },
    {
        "label": "All Blogs",
        "path": "/admin/all-blogs",
        "icon": "👥",
        "description": "Manage blogs",
        "moduleKey": "all_blogs",
        "order": 5,
    },
    {
        "label": "User Analytics",
        "path": "/admin/analytics",
        "icon": "📊",
        "description": "View detailed reports",
        "moduleKey": "user_analytics",
        "order": 6,
    },
    {
        "label": "Request Call Back",
        "path": "/admin/get-in-touch",
        "icon": "📞",
        "description": "View and export user call back requests",
        "moduleKey": "request_callback",
        "order": 7,
    },
    {
        "label": "Manage Job",
        "path": "/admin/job-manage",
        "icon": "⚙️",
        "description": "Approve or decline job",
        "moduleKey": "manage_job",
        "order": 8,
    },
    {
        "label": "Staff Management",
        "icon": "👥",
        "description": "Manage Staff",
        "moduleKey": "staff_management",
        "order": 9,
        "children": [
            {"label": "Create Staff", "path": "/admin/create-staff", "order": 1},
            {"label": "Create Services", "path": "/admin/admin-add-service", "order": 2},
            {"label": "Create Vendor", "path": "/admin/admin-create-vendor", "order": 3},
            {"label": "View EOD Report", "path": "/admin/getAllEodNotes", "order": 4},
            {"label": "Patient Report", "path": "/admin/patient-report", "order": 5},
            {"label": "Track Expenses", "path": "/admin/track-expenses", "order": 6},
            {"label": "Contracts", "path": "/admin/Contractor", "order": 7},
        ],
    },
    {
        "label": "Create Agent",
        "path": "/admin/create-agent",
        "moduleKey": "create_agent",
        "order": 10,
    },
    {
        "label": "SMS Management",
        "icon": "💬",
        "description": "Manage SMS wallets and top-ups",
        "moduleKey": "sms_management",
        "order": 11,
        "children": [
            {"label": "Manage Wallets", "path": "/admin/manage-sms-wallets", "order": 1},
            {"label": "Top-up Requests", "path": "/admin/manage-sms-topups", "order": 2},
        ],
    },
)

CLINIC_NAVIGATION_TEMPLATES = (
    {
        "label": "Dashboard",
        "path": "/clinic/clinic-dashboard",
        "icon": "🏠",
        "moduleKey": "dashboard",
        "order": 1,
    },
    {
        "label": "Assigned Leads",
        "path": "/clinic/assigned-leads",
        "moduleKey": "assignedLead",
        "order": 2,
    },
    {
        "label": "Manage Health Center",
        "path": "/clinic/myallClinic",
        "moduleKey": "manage_clinic",
        "order": 3,
    },
    {
        "label": "Patient Claims",
        "path": "/clinic/patient-claims",
        "moduleKey": "patient_claims",
        "order": 4,
    },
    {
        "label": "Staff Management",
        "moduleKey": "staff_management",
        "order": 5,
        "children": _staff_management_children("clinic"),
    },
    {
        "label": "Lead",
        "moduleKey": "lead",
        "order": 6,
        "children": _lead_children("clinic"),
    },
    {
        "label": "Marketing",
        "moduleKey": "marketing",
        "order": 7,
        "children": _marketing_children("clinic"),
    },
    {
        "label": "Create Agent",
        "path": "/clinic/create-agent",
        "moduleKey": "create_agent",
        "order": 8,
    },
)

DOCTOR_NAVIGATION_TEMPLATES = (
    {
        "label": "Dashboard",
        "path": "/doctor/doctor-dashboard",
        "moduleKey": "dashboard",
        "order": 1,
    },
    {
        "label": "Assigned Leads",
        "path": "/doctor/assigned-leads",
        "moduleKey": "assignedLead",
        "order": 2,
    },
    {
        "label": "Manage Profile",
        "path": "/doctor/manageDoctor",
        "moduleKey": "manage_profile",
        "order": 3,
    },
    {
        "label": "All users Review",
        "path": "/doctor/getReview",
        "moduleKey": "all_users_review",
        "order": 4,
    },
    {
        "label": "Blogs",
        "moduleKey": "blogs",
        "order": 5,
        "children": [
            {"label": "Write Article", "path": "/doctor/BlogForm", "order": 1},
            {"label": "Published Blogs", "path": "/doctor/published-blogs", "order": 2},
            {"label": "Blog Analytics", "path": "/doctor/getAuthorCommentsAndLikes", "order": 3},
        ],
    },
    {
        "label": "Staff Management",
        "moduleKey": "staff_management",
        "order": 6,
        "children": _staff_management_children("clinic"),
    },
    {
        "label": "Jobs",
        "moduleKey": "jobs",
        "order": 7,
        "children": [
            {"label": "Post Job", "path": "/doctor/create-job", "order": 1},
            {"label": "See Jobs", "path": "/doctor/my-jobs", "order": 2},
            {"label": "Job Applicants", "path": "/doctor/job-applicants", "order": 3},
        ],
    },
    {
        "label": "Prescription Requests",
        "path": "/doctor/prescription-requests",
        "moduleKey": "prescription_requests",
        "order": 8,
    },
    {
        "label": "Create Agent",
        "path": "/doctor/create-agent",
        "moduleKey": "create_agent",
        "order": 9,
    },
    {
        "label": "Lead",
        "moduleKey": "lead",
        "order": 10,
        "children": _lead_children("doctor"),
    },
    {
        "label": "Marketing",
        "moduleKey": "marketing",
        "order": 11,
        "children": _marketing_children("doctor"),
    },
)

NAVIGATION_TEMPLATES_BY_ROLE = {
    ROLE_ADMIN: ADMIN_NAVIGATION_TEMPLATES,
    ROLE_CLINIC: CLINIC_NAVIGATION_TEMPLATES,
    ROLE_DOCTOR: DOCTOR_NAVIGATION_TEMPLATES,
}
