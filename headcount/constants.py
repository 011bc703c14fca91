# Gregorian year + 543 = Buddhist-era year used on every report date
BUDDHIST_ERA_OFFSET = 543

# Upper bound of photos attached to a single report
MAX_IMAGES = 10

INFIRMARY = "เรือนพยาบาล"

# Declared order drives the dashboard rows and chart bars
DORMITORIES = [
    "แพรวา", "ภูไท", "ฟ้าแดด", "ลำปาว", "โปงลาง", "ภูพาน",
    "สงยาง", "ไดโนเสาร์", "ไดโนเสาร์ 2", "มะหาด", "พะยอม", INFIRMARY,
]

POSITIONS = [
    "พนักงานราชการ", "ครูผู้ช่วย", "ครู", "ครูชำนาญการ",
    "ครูชำนาญการพิเศษ", "รองผู้อำนวยการชำนาญการ", "รองผู้อำนวยการชำนาญการพิเศษ",
]

ACADEMIC_YEARS = [str(2560 + i) for i in range(11)]

DORMITORY_CHOICES = [(d, d) for d in DORMITORIES]
POSITION_CHOICES = [(p, p) for p in POSITIONS]
ACADEMIC_YEAR_CHOICES = [(y, y) for y in ACADEMIC_YEARS]
