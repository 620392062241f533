#!/usr/bin/env python3
import argparse, glob, os, re, sys
import pandas as pd

RUN_RE = re.compile(r"summary_decisions_(?P<session>.+)\.csv$")

def df_to_md(df: pd.DataFrame) -> str:
    return df.to_markdown(index=False)

def pick_summary(summaries_dir: str, session: str|None) -> str|None:
    files = glob.glob(os.path.join(summaries_dir, "summary_decisions_*.csv"))
    matches = []
    for p in files:
        m = RUN_RE.search(os.path.basename(p))
        if not m:
            continue
        if session and m.group("session") != session:
            continue
        matches.append(p)
    if not matches:
        return None
    # newest by mtime
    matches.sort(key=os.path.getmtime)
    return matches[-1]

def build_report(df: pd.DataFrame, title: str) -> str:
    report = ["# Green Circle Bot – Decision Report", ""]
    total = int(df["decisions"].sum()) if "decisions" in df.columns else 0
    turns = int(df["last_turn"].max()) if "last_turn" in df.columns and len(df) else 0
    report.append(f"**Summary:** {title} | **Decisions:** {total} | **Move turns:** {turns}")
    report.append("")

    report.append("## Decisions per phase\n")
    report.append(df_to_md(df.fillna("-")))
    report.append("")

    if "n_release" in df.columns and "n_wait" in df.columns:
        rel = df[df["phase"] == "RELEASE"]
        if len(rel):
            r = rel.iloc[0]
            asked = r["n_release"] + r["n_wait"]
            rate = (r["n_release"] / asked) if asked else 0.0
            report.append("## Release phase\n")
            report.append(f"- released: {int(r['n_release'])}")
            report.append(f"- waited: {int(r['n_wait'])}")
            report.append(f"- release rate: {rate:.2f}")
            report.append("")
    return "\n".join(report)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--summaries_dir", default="summaries")
    ap.add_argument("--session", default=None, help="Session id of the summary (default: newest)")
    ap.add_argument("--summary", default=None, help="Explicit summary CSV path (overrides discovery)")
    ap.add_argument("--out", default="summaries/analysis_report.md")
    args = ap.parse_args()

    path = args.summary or pick_summary(args.summaries_dir, args.session)
    if not path:
        print("[analyze] No matching summary CSVs found.")
        sys.exit(1)
    print(f"[analyze] Using: {path}")

    try:
        df = pd.read_csv(path)
    except pd.errors.EmptyDataError:
        df = pd.DataFrame(columns=["phase", "decisions"])

    report = build_report(df, os.path.basename(path))

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(args.out, "w", encoding="utf-8") as f:
        f.write(report)
    print(f"[analyze] Wrote {args.out}")

if __name__ == "__main__":
    main()
