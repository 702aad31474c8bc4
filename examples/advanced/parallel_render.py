"""Thread safe: one compiled program, many concurrent renders."""

from concurrent.futures import ThreadPoolExecutor

from qtpl import Template

row = Template("<tr><td>{i}</td><td>{i * i}</td></tr>", params=("i",))

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(row.render_string, range(1000)))

print(f"Rendered {len(results)} rows in parallel")
print("First:", results[0])
print("Last:", results[-1])
