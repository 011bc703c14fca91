from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Report",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("report_date", models.CharField(help_text="Buddhist-era D/M/Y, e.g. 15/7/2567", max_length=16)),
                ("reporter_name", models.CharField(max_length=150)),
                ("position", models.CharField(choices=[("พนักงานราชการ", "พนักงานราชการ"), ("ครูผู้ช่วย", "ครูผู้ช่วย"), ("ครู", "ครู"), ("ครูชำนาญการ", "ครูชำนาญการ"), ("ครูชำนาญการพิเศษ", "ครูชำนาญการพิเศษ"), ("รองผู้อำนวยการชำนาญการ", "รองผู้อำนวยการชำนาญการ"), ("รองผู้อำนวยการชำนาญการพิเศษ", "รองผู้อำนวยการชำนาญการพิเศษ")], max_length=64)),
                ("academic_year", models.CharField(choices=[("2560", "2560"), ("2561", "2561"), ("2562", "2562"), ("2563", "2563"), ("2564", "2564"), ("2565", "2565"), ("2566", "2566"), ("2567", "2567"), ("2568", "2568"), ("2569", "2569"), ("2570", "2570")], max_length=4)),
                ("dormitory", models.CharField(choices=[("แพรวา", "แพรวา"), ("ภูไท", "ภูไท"), ("ฟ้าแดด", "ฟ้าแดด"), ("ลำปาว", "ลำปาว"), ("โปงลาง", "โปงลาง"), ("ภูพาน", "ภูพาน"), ("สงยาง", "สงยาง"), ("ไดโนเสาร์", "ไดโนเสาร์"), ("ไดโนเสาร์ 2", "ไดโนเสาร์ 2"), ("มะหาด", "มะหาด"), ("พะยอม", "พะยอม"), ("เรือนพยาบาล", "เรือนพยาบาล")], max_length=64)),
                ("present_count", models.PositiveIntegerField(default=0)),
                ("sick_count", models.PositiveIntegerField(default=0)),
                ("log", models.TextField(blank=True)),
                ("created", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-id"],
                "indexes": [models.Index(fields=["dormitory"], name="idx_report_dormitory")],
            },
        ),
        migrations.CreateModel(
            name="ReportImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("image", models.ImageField(upload_to="reports/%Y/%m/")),
                ("uploaded", models.DateTimeField(auto_now_add=True)),
                ("report", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="images", to="headcount.report")),
            ],
            options={
                "ordering": ["id"],
            },
        ),
    ]
