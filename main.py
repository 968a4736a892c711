import sys
import logging
import datetime
import warnings
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from core.models import SpecFamily, HarnessRequest
from core.errors import HarnessError
from standards.harness_logic import HarnessLogic
from standards.wire_tables import WIRE_TABLES, CONTACT_RESISTANCE, TEMPERATURE_BASIS_C

logging.basicConfig(
    level=logging.ERROR,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

def get_segments_input():
    segments = []
    print("\n--- Segmentos de Arnés ---")

    while True:
        print(f"\n[Segmento #{len(segments)+1}]")
        name = input("Nombre del segmento: ").strip()
        if not name: break

        try:
            gauge = int(input("Calibre (AWG): "))
            strands = int(input("Número de hilos en paralelo [1]: ") or 1)
            length = float(input("Longitud (ft): "))

            # Blank -> preferred spec for the gauge
            print("Especificación: (33) M22759/33, (44) M22759/44, (0) Sin especificación, [Enter] Automática")
            spec_str = input("Especificación []: ").strip()
            family = SpecFamily.from_code(spec_str) if spec_str else None

            request = HarnessRequest(gauge=gauge, strand_count=strands, length_ft=length, spec_family=family)
            segments.append((name, request))

        except ValueError as e:
            print(f"Error en entrada de datos: {e}. Intente de nuevo.")

        more = input("¿Agregar otro segmento? (s/n): ").lower()
        if more != 's':
            break

    return segments

def calculate_segments(segments):
    """Returns one dict per segment: name, request, result (None on error), notes, error."""
    rows = []
    for name, request in segments:
        row = {"name": name, "request": request, "result": None, "notes": [], "error": None}
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                row["result"] = HarnessLogic.calculate(request)
            except HarnessError as e:
                row["error"] = str(e)
        # Advisories are also in result.notes; keep whichever arrived
        row["notes"] = list(row["result"].notes) if row["result"] else [str(w.message) for w in caught]
        rows.append(row)
    return rows

def export_to_excel(rows, filename=None):
    wb = Workbook()

    # --- Sheet 1: Segments ---
    ws1 = wb.active
    ws1.title = "Segmentos"

    headers = ["Segmento", "AWG", "Hilos", "Long.(ft)", "Especificación", "Ohm/ft", "Ohm/contacto", "Resistencia (Ohm)", "Notas"]
    ws1.append(headers)

    header_fill = PatternFill(start_color="DDDDDD", end_color="DDDDDD", fill_type="solid")
    header_font = Font(bold=True)
    for cell in ws1[1]:
        cell.font = header_font
        cell.fill = header_fill

    for item in rows:
        req = item["request"]
        res = item["result"]
        if res is None:
            ws1.append([item["name"], req.gauge, req.strand_count, req.length_ft,
                        req.spec_family.label if req.spec_family else "Auto",
                        None, None, None, item["error"]])
            continue
        spec_txt = res.spec_family.label + (" (auto)" if res.spec_inferred else "")
        ws1.append([
            item["name"], req.gauge, req.strand_count, req.length_ft, spec_txt,
            res.ohms_per_foot, res.ohms_per_contact, round(res.resistance_ohms, 6),
            "; ".join(item["notes"])
        ])

    for col in ws1.columns:
        ws1.column_dimensions[col[0].column_letter].width = 15

    # --- Sheet 2: Reference tables ---
    ws2 = wb.create_sheet("Tablas de Referencia")
    ws2.append([f"Resistencias a {TEMPERATURE_BASIS_C:.0f}°C / 68°F"])
    for family, table in WIRE_TABLES.items():
        ws2.append([])
        ws2.append([family.description, "Ohm/ft"])
        for gauge, value in table:
            ws2.append([gauge, value])
    ws2.append([])
    ws2.append(["Contacto D38999 (peor caso)", "Ohm/contacto"])
    for gauge, value in CONTACT_RESISTANCE:
        ws2.append([gauge, value])

    if filename is None:
        filename = f"Resistencia_Arnes_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    wb.save(filename)
    print(f"\n[INFO] Excel generado: {filename}")
    return filename

def main():
    print("==========================================================")
    print(" RESISTENCIA DE ARNÉS (M22759/33 - M22759/44 - D38999)")
    print("==========================================================")

    segments = get_segments_input()

    if not segments:
        print("No se ingresaron segmentos.")
        sys.exit()

    print("\nCalculando Segmentos...")
    print("-" * 110)
    print(f"{'Segmento':<15} | {'AWG':<4} | {'Hilos':<5} | {'Long(ft)':<8} | {'Spec':<15} | {'Ohm':<10} | {'Notas'}")
    print("-" * 110)

    rows = calculate_segments(segments)

    for item in rows:
        req = item["request"]
        res = item["result"]
        if res is None:
            print(f"{item['name']:<15} | {req.gauge:<4} | {req.strand_count:<5} | {req.length_ft:<8.1f} | {'-':<15} | {'ERROR':<10} | {item['error']}")
            continue
        warn = " (!)" if item["notes"] else ""
        spec_txt = res.spec_family.label + ("*" if res.spec_inferred else "")
        print(f"{item['name']:<15} | {req.gauge:<4} | {req.strand_count:<5} | {req.length_ft:<8.1f} | {spec_txt:<15} | {res.resistance_ohms:<10.4f}{warn} | {'; '.join(item['notes'])}")

    print("-" * 110)
    print("* Especificación seleccionada automáticamente según el calibre.")

    ask = input("\n¿Exportar reporte a Excel? (s/n): ").lower()
    if ask == 's':
        export_to_excel(rows)

if __name__ == "__main__":
    main()
