"""Literal reporting data for the Faculty of Computing programmes."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

TOTAL_STUDENTS = 2639
TOTAL_REGISTRATIONS = 1567
PENDING_REGISTRATIONS = 156

# (code, name) in display order.
PROGRAMMES: Tuple[Tuple[str, str], ...] = (
    ("SECJH", "Software Engineering"),
    ("SECRH", "Network and Cybersecurity"),
    ("SECVH", "Graphic and Computer Multimedia"),
    ("SECBH", "Bioinformatics"),
    ("SECPH", "Data Engineering"),
)

PROGRAMME_NAMES: Dict[str, str] = dict(PROGRAMMES)

STUDENTS_PER_COURSE: Dict[str, int] = {
    "SECJH": 749,
    "SECRH": 550,
    "SECVH": 600,
    "SECBH": 320,
    "SECPH": 420,
}

# Ascending by year; the last entry matches TOTAL_STUDENTS.
ENROLLMENT_TREND: Tuple[Tuple[int, int], ...] = (
    (2017, 2456),
    (2018, 2312),
    (2019, 2589),
    (2020, 2234),
    (2021, 2478),
    (2022, 2356),
    (2023, 2687),
    (2024, 2512),
    (2025, 2745),
    (2026, 2639),
)

# code -> (registered, not registered)
REGISTRATION_STATUS: Dict[str, Tuple[int, int]] = {
    "SECJH": (445, 304),
    "SECRH": (328, 222),
    "SECVH": (356, 244),
    "SECBH": (185, 135),
    "SECPH": (253, 167),
}

PENDING_COUNTS: Dict[str, int] = {
    "SECJH": 45,
    "SECRH": 32,
    "SECVH": 38,
    "SECBH": 18,
    "SECPH": 23,
}

# code -> [(student id, student name, submitted date)], ten per programme.
# Only a sample of each programme's pending requests is listed.
PENDING_STUDENTS: Dict[str, List[Tuple[str, str, str]]] = {
    "SECJH": [
        ("A23CS0156", "Muhammad Syahmi Faris bin Rusli", "2026-01-15"),
        ("A23CS0445", "Muhammad Adam bin Razali", "2026-01-15"),
        ("A23CS0523", "Danish Hakim bin Aziz", "2026-01-14"),
        ("A23CS0601", "Ahmad Farhan bin Yusof", "2026-01-14"),
        ("A23CS0612", "Nurul Aina binti Kamal", "2026-01-13"),
        ("A23CS0623", "Mohd Haziq bin Ismail", "2026-01-13"),
        ("A23CS0634", "Siti Aminah binti Rahman", "2026-01-12"),
        ("A23CS0645", "Khairul Anwar bin Samad", "2026-01-12"),
        ("A23CS0656", "Nur Atiqah binti Hassan", "2026-01-11"),
        ("A23CS0667", "Muhammad Irfan bin Azman", "2026-01-11"),
    ],
    "SECRH": [
        ("A23CS0234", "Muhammad Naim bin Abdullah", "2026-01-15"),
        ("A23CS0267", "Nuraisyah binti Zikre", "2026-01-15"),
        ("A23CS0701", "Amir Hamzah bin Kamal", "2026-01-14"),
        ("A23CS0712", "Sarina binti Hashim", "2026-01-14"),
        ("A23CS0723", "Mohd Faiz bin Osman", "2026-01-13"),
        ("A23CS0734", "Nur Hidayah binti Razak", "2026-01-13"),
        ("A23CS0745", "Ahmad Danial bin Zainal", "2026-01-12"),
        ("A23CS0756", "Fatimah binti Abdullah", "2026-01-12"),
        ("A23CS0767", "Haziq bin Jaafar", "2026-01-11"),
        ("A23CS0778", "Aina Sofea binti Noor", "2026-01-11"),
    ],
    "SECVH": [
        ("A23CS0189", "Muhammad Afiq Danish bin Mohd Hazni", "2026-01-15"),
        ("A23CS0178", "Hoe Zhi Wan", "2026-01-15"),
        ("A23CS0801", "Tan Wei Ming", "2026-01-14"),
        ("A23CS0812", "Lim Siew Ling", "2026-01-14"),
        ("A23CS0823", "Wong Kai Xin", "2026-01-13"),
        ("A23CS0834", "Nurul Syafiqah binti Ali", "2026-01-13"),
        ("A23CS0845", "Lee Jun Wei", "2026-01-12"),
        ("A23CS0856", "Ong Mei Ying", "2026-01-12"),
        ("A23CS0867", "Ahmad Zulkifli bin Hassan", "2026-01-11"),
        ("A23CS0878", "Ng Wei Lin", "2026-01-11"),
    ],
    "SECBH": [
        ("A23CS0312", "Welson Woong Lu Bin", "2026-01-15"),
        ("A23CS0901", "Nurul Aisyah binti Razak", "2026-01-15"),
        ("A23CS0912", "Irfan bin Mohd Noor", "2026-01-14"),
        ("A23CS0923", "Chan Siew Mei", "2026-01-14"),
        ("A23CS0934", "Mohd Hafiz bin Yusof", "2026-01-13"),
        ("A23CS0945", "Nur Amira binti Kamal", "2026-01-13"),
        ("A23CS0956", "Tan Jia Wei", "2026-01-12"),
        ("A23CS0967", "Siti Nur Ain binti Samad", "2026-01-12"),
        ("A23CS0978", "Lim Chun Kiat", "2026-01-11"),
        ("A23CS0989", "Ahmad Firdaus bin Rahman", "2026-01-11"),
    ],
    "SECPH": [
        ("A23CS0098", "Ang Chun Wei", "2026-01-15"),
        ("A23CS0334", "Muhammad Amirun Irfan bin Samsul Shah", "2026-01-15"),
        ("A23CS1001", "Mohd Farhan bin Yusof", "2026-01-14"),
        ("A23CS1012", "Aina Sofea binti Zainal", "2026-01-14"),
        ("A23CS1023", "Haziq bin Jaafar", "2026-01-13"),
        ("A23CS1034", "Nurul Izzah binti Osman", "2026-01-13"),
        ("A23CS1045", "Wong Jia Hao", "2026-01-12"),
        ("A23CS1056", "Siti Zulaikha binti Ismail", "2026-01-12"),
        ("A23CS1067", "Lee Wei Jie", "2026-01-11"),
        ("A23CS1078", "Nur Fatin binti Hashim", "2026-01-11"),
    ],
}

SAMPLE_ACTIVITY: Tuple[Dict[str, str], ...] = (
    {
        "type": "settings",
        "user": "System Administrator",
        "action": "Updated system settings",
        "time": "2026-01-17T16:30:00",
        "icon": "settings",
    },
    {
        "type": "approve",
        "user": "System Administrator",
        "action": "Batch approved 15 registrations for SECRH",
        "time": "2026-01-17T15:45:00",
        "icon": "check",
    },
    {
        "type": "export",
        "user": "System Administrator",
        "action": "Exported registration report",
        "time": "2026-01-17T14:20:00",
        "icon": "download",
    },
)


def students_per_course() -> List[Dict[str, Any]]:
    return [
        {"courseName": name, "courseCode": code, "studentCount": STUDENTS_PER_COURSE[code]}
        for code, name in PROGRAMMES
    ]


def enrollment_trend(years: int) -> List[Dict[str, int]]:
    """Return the last ``years`` entries of the trend, oldest first."""

    return [
        {"year": year, "studentCount": count}
        for year, count in ENROLLMENT_TREND[-years:]
    ]


def registration_status() -> List[Dict[str, Any]]:
    return [
        {
            "courseCode": code,
            "courseName": name,
            "registered": REGISTRATION_STATUS[code][0],
            "notRegistered": REGISTRATION_STATUS[code][1],
        }
        for code, name in PROGRAMMES
    ]


def pending_registrations() -> Dict[str, Any]:
    summary = [
        {"courseCode": code, "courseName": name, "pendingCount": PENDING_COUNTS[code]}
        for code, name in PROGRAMMES
    ]
    registrations = {
        code: [
            {
                "studentId": student_id,
                "studentName": student_name,
                "courseCode": code,
                "courseName": name,
                "submittedDate": submitted,
            }
            for student_id, student_name, submitted in PENDING_STUDENTS[code]
        ]
        for code, name in PROGRAMMES
    }
    return {"summary": summary, "registrations": registrations}


def sample_activity() -> List[Dict[str, str]]:
    return [dict(entry) for entry in SAMPLE_ACTIVITY]


def course_catalogue() -> List[Dict[str, str]]:
    """Course documents for the ``courses`` collection."""

    return [{"_id": code, "title": name} for code, name in PROGRAMMES]


__all__ = [
    "TOTAL_STUDENTS",
    "TOTAL_REGISTRATIONS",
    "PENDING_REGISTRATIONS",
    "PROGRAMMES",
    "students_per_course",
    "enrollment_trend",
    "registration_status",
    "pending_registrations",
    "sample_activity",
    "course_catalogue",
]
