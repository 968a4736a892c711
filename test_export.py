import os
import tempfile
import unittest
from openpyxl import load_workbook
from core.models import SpecFamily, HarnessRequest
from main import calculate_segments, export_to_excel

class TestSegmentsReport(unittest.TestCase):
    def setUp(self):
        self.segments = [
            ("Bus A", HarnessRequest(22, 1, 10.0, SpecFamily.SPEC_33)),
            ("Power", HarnessRequest(gauge=6, strand_count=2, length_ft=20.0)),
            ("Bad", HarnessRequest(21, 1, 5.0, SpecFamily.SPEC_33)),
        ]

    def test_calculate_segments(self):
        rows = calculate_segments(self.segments)
        self.assertEqual(len(rows), 3)

        self.assertAlmostEqual(rows[0]["result"].resistance_ohms, 0.2316)
        self.assertEqual(rows[0]["notes"], [])

        # 6 AWG is below the contact table -> advisory, still a result
        self.assertIsNotNone(rows[1]["result"])
        self.assertEqual(len(rows[1]["notes"]), 1)
        self.assertIn("contact spec", rows[1]["notes"][0])

        self.assertIsNone(rows[2]["result"])
        self.assertIn("M22759/33", rows[2]["error"])

    def test_export_to_excel(self):
        rows = calculate_segments(self.segments)
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "report.xlsx")
            self.assertEqual(export_to_excel(rows, path), path)

            wb = load_workbook(path)
            self.assertEqual(wb.sheetnames, ["Segmentos", "Tablas de Referencia"])

            ws = wb["Segmentos"]
            self.assertEqual(ws.cell(row=1, column=1).value, "Segmento")
            self.assertEqual(ws.cell(row=2, column=1).value, "Bus A")
            self.assertAlmostEqual(ws.cell(row=2, column=8).value, 0.2316)
            self.assertEqual(ws.cell(row=3, column=5).value, "M22759/0 (auto)")
            self.assertIsNone(ws.cell(row=4, column=8).value)

            ref_values = [c.value for c in wb["Tablas de Referencia"]["A"]]
            self.assertIn("Contacto D38999 (peor caso)", ref_values)
            wb.close()

if __name__ == '__main__':
    unittest.main()
