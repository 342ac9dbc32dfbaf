"""
Process-wide constants for the subject-scaling calculator.

YEARS is the column axis of the selection matrix. The subject tables are
the stable QLD QCE subject IDs carried between annual course-scaling
tables; the column names match the 25-column course-scaling export.
"""

# ============================================================
# Academic years (column axis, fixed at process start)
# ============================================================
YEARS = ("2020", "2021", "2022", "2023", "2024", "2025")

# ============================================================
# Subject ID lookup (stable across years)
# ============================================================
SUBJECT_IDS = {
    "Aboriginal and Torres Strait Islander Studies": 2, "Accounting": 3,
    "Aerospace Systems": 4, "Agricultural Science": 6, "Ancient History": 7,
    "Biology": 10, "Business": 12, "Chemistry": 15, "Chinese": 17,
    "Chinese Extension": 16, "Dance": 18, "Design": 20, "Digital Solutions": 21,
    "Drama": 22, "Earth and Environmental Science": 25, "Economics": 26,
    "Engineering": 27, "English": 31, "English and Literature Extension": 29,
    "English as an Additional Language": 30, "Film Television and New Media": 35,
    "Food and Nutrition": 36, "French": 38, "French Extension": 37,
    "General Mathematics": 40, "Geography": 41, "German": 43, "German Extension": 42,
    "Health": 44, "Italian": 49, "Japanese": 50, "Legal Studies": 51,
    "Literature": 53, "Marine Science": 54, "Mathematical Methods": 55,
    "Modern History": 57, "Music": 61, "Music Extension (Composition)": 58,
    "Music Extension (Musicology)": 59, "Music Extension (Performance)": 60,
    "Philosophy and Reason": 64, "Physical Education": 65, "Physics": 66,
    "Psychology": 67, "Spanish": 71, "Specialist Mathematics": 72,
    "Study of Religion": 74, "Visual Art": 76,
    "Korean": 140, "Vietnamese": 98, "Arabic": 97,
    "Indonesian": 142, "Latin": 144, "Modern Greek": 145, "Polish": 146,
    "Punjabi": 147, "Russian": 148, "Tamil": 149,
    "Agricultural Practices": 5, "Aquatic Practices": 8, "Arts in Practice": 9,
    "Building and Construction Skills": 11, "Business Studies": 13,
    "Dance in Practice": 19, "Drama in Practice": 23, "Early Childhood Studies": 24,
    "Engineering Skills": 28, "Essential English": 32, "Essential Mathematics": 33,
    "Fashion": 34, "Furnishing Skills": 39, "Hospitality Practices": 45,
    "Industrial Graphics Skills": 46, "Industrial Technology Skills": 47,
    "Information and Communication Technology": 48, "Media Arts in Practice": 56,
    "Music in Practice": 62, "Religion and Ethics": 68, "Science in Practice": 69,
    "Social and Community Studies": 70, "Sport and Recreation": 73, "Tourism": 75,
    "Visual Arts in Practice": 80,
}

# VET subjects carried forward each year (name, id, qualification level)
VET_SUBJECTS = [
    ("Diploma in Business", 91, "DIPLOMA"),
    ("Cert III Agriculture", 92, "CERTIII"),
    ("Cert III Automotive Electrical Technology", 114, "CERTIII"),
    ("Cert III Aviation", 111, "CERTIII"),
    ("Cert III Business", 81, "CERTIII"),
    ("Cert III Cabinet Making", 83, "CERTIII"),
    ("Cert III Carpentry", 84, "CERTIII"),
    ("Cert III Child Care", 96, "CERTIII"),
    ("Cert III Early Childhood Education", 123, "CERTIII"),
    ("Cert III Fitness", 82, "CERTIII"),
    ("Cert III Health Services Assistance", 108, "CERTIII"),
    ("Cert III Health Support Services", 131, "CERTIII"),
    ("Cert III Hospitality", 139, "CERTIII"),
    ("Cert III Lab Skills", 135, "CERTIII"),
    ("Cert III Laboratory Skills", 129, "CERTIII"),
    ("Cert III Light Vehicle Mechanical Tech", 85, "CERTIII"),
    ("Cert III Retail", 133, "CERTIII"),
]

# ============================================================
# Subject types and applied grades
# ============================================================
SUBJECT_TYPES = ("general", "applied", "vet", "nodata")

# Applied subjects store the C/B/A scaled values in P50/P75/P90 Y
GRADES = {"C": "p50y", "B": "p75y", "A": "p90y"}

UNNAMED_SUBJECT = "(Unnamed Subject)"

# ============================================================
# Course-scaling table columns (attribute <- column name)
# ============================================================
SUBJECT_COLUMN = "Subject Name"
YEAR_COLUMN = "Year"
TYPE_COLUMN = "Subject Type"

COURSE_SCALE_COLUMNS = {
    'subject_id': 'Subject ID',
    'min_x': 'Min X', 'pzx': 'PZX', 'p25x': 'P25 X', 'p50x': 'P50 X',
    'p75x': 'P75 X', 'p90x': 'P90 X', 'p99x': 'P99 X', 'max_x': 'Max X',
    'min_y': 'Min Y', 'pzy': 'PZY', 'p25y': 'P25 Y', 'p50y': 'P50 Y',
    'p75y': 'P75 Y', 'p90y': 'P90 Y', 'p99y': 'P99 Y', 'max_y': 'Max Y',
    'X4': 'X4', 'X3': 'X3', 'X2': 'X2', 'X1': 'X1', 'X0': 'X0',
    'Z3': 'Z3', 'Z2': 'Z2', 'Z1': 'Z1', 'Z0': 'Z0',
}
