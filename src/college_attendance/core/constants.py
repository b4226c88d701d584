"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Persisted keys
STUDENTS_KEY = "students"
SUBJECTS_KEY = "subjects"
ATTENDANCE_KEY = "attendanceRecords"
RECOVERY_KEY = "recoveryStatus"
SESSION_KEY = "attendanceUser"

SESSION_SCOPED_KEYS = (STUDENTS_KEY, SUBJECTS_KEY, ATTENDANCE_KEY, RECOVERY_KEY)

CLASS_NUMBERS = tuple(str(n) for n in range(1, 11))
PERIODS = tuple(str(n) for n in range(1, 9))

ROSTER_DELIMITER = ","
DEFAULT_STORE_NAMESPACE = "college_attendance"
