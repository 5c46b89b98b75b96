import tkinter as tk
from tkinter import ttk, filedialog, messagebox
from tkinter.scrolledtext import ScrolledText
import threading

from stamp3r.capacity import check_embed_feasibility
from stamp3r.errors import CapacityError, Mp3Error
from stamp3r.extract import hidden_text
from stamp3r.mp3stream import MP3Stream


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("stamp3r - MP3 private bits")
        self.geometry("880x600")
        self.resizable(True, True)

        self.in_var = tk.StringVar()
        self.out_var = tk.StringVar()
        self.msg_var = tk.StringVar()
        self.framed_var = tk.BooleanVar(value=False)

        self._build()

    # UI BUILD
    def _build(self):
        pad = dict(padx=8, pady=6, sticky="w")
        f = ttk.Frame(self, padding=10)
        f.pack(fill=tk.BOTH, expand=True)

        ttk.Label(f, text="Input MP3:").grid(row=0, column=0, **pad)
        ttk.Entry(f, textvariable=self.in_var, width=70).grid(row=0, column=1, **pad)
        ttk.Button(f, text="Browse...", command=self._pick_in).grid(row=0, column=2, **pad)

        ttk.Label(f, text="Output MP3:").grid(row=1, column=0, **pad)
        ttk.Entry(f, textvariable=self.out_var, width=70).grid(row=1, column=1, **pad)
        ttk.Button(f, text="Save As...", command=self._pick_out).grid(row=1, column=2, **pad)

        ttk.Label(f, text="Hidden text:").grid(row=2, column=0, **pad)
        ttk.Entry(f, textvariable=self.msg_var, width=70).grid(row=2, column=1, **pad)
        ttk.Checkbutton(f, text="Length-prefixed", variable=self.framed_var).grid(row=2, column=2, **pad)

        btns = ttk.Frame(f); btns.grid(row=3, column=0, columnspan=3, **pad)
        ttk.Button(btns, text="Compute Capacity", command=self._capacity).pack(side=tk.LEFT, padx=5)
        ttk.Button(btns, text="Show Hidden Data", command=self._extract).pack(side=tk.LEFT, padx=5)
        ttk.Button(btns, text="Embed", command=self._embed).pack(side=tk.LEFT, padx=5)

        ttk.Label(f, text="Log / Info:").grid(row=4, column=0, sticky="nw", padx=8, pady=6)
        self.log = ScrolledText(f, height=14)
        self.log.grid(row=4, column=1, columnspan=2, sticky="nsew", padx=8, pady=6)
        f.rowconfigure(4, weight=1); f.columnconfigure(1, weight=1)

    # File pickers
    def _pick_in(self):
        fn = filedialog.askopenfilename(title="Pick MP3", filetypes=[("MP3 files", "*.mp3"), ("All files", "*.*")])
        if fn: self.in_var.set(fn)

    def _pick_out(self):
        fn = filedialog.asksaveasfilename(title="Save MP3 as", defaultextension=".mp3", filetypes=[("MP3 files", "*.mp3")])
        if fn: self.out_var.set(fn)

    def _log(self, msg: str):
        self.log.insert("end", msg + "\n")
        self.log.see("end")

    def _run(self, title: str, work):
        """Run ``work`` off the UI thread; it returns the lines to log."""
        def task():
            try:
                lines = work()
                for line in lines:
                    self.after(0, lambda m=line: self._log(m))
            except Mp3Error as e:
                error_msg = str(e)
                self.after(0, lambda msg=error_msg: messagebox.showerror(title, msg))
        threading.Thread(target=task, daemon=True).start()

    def _input(self):
        path = self.in_var.get().strip()
        if not path:
            messagebox.showwarning("Missing", "Please choose an input MP3.")
        return path

    # Actions
    def _capacity(self):
        path = self._input()
        if not path: return
        def work():
            st = MP3Stream.load(path)
            return [f'File "{st.name}" loaded, {st.private_bits} bits available ({st.capacity_bytes} bytes)']
        self._run("Capacity", work)

    def _extract(self):
        path = self._input()
        if not path: return
        framed = self.framed_var.get()
        def work():
            st = MP3Stream.load(path)
            data = st.payload(length_prefixed=True) if framed else hidden_text(st.extract())
            if not data:
                return ["The file contains no hidden data"]
            return ["Hidden data:", data.decode("utf-8", errors="replace")]
        self._run("Extract", work)

    def _embed(self):
        path = self._input()
        out = self.out_var.get().strip()
        if not path: return
        if not out:
            messagebox.showwarning("Missing", "Please choose an output MP3."); return
        payload = self.msg_var.get().encode("utf-8")
        framed = self.framed_var.get()

        def work():
            st = MP3Stream.load(path)
            fz = check_embed_feasibility(st.data, payload, length_prefixed=framed)
            if not fz["fits"]:
                raise CapacityError(required_bits=fz["required_bits"], capacity_bits=fz["capacity_bits"])
            st.embed(payload, length_prefixed=framed)
            st.export(out)
            return [f"Embedded {len(payload)} bytes ({fz['margin_bits']} bits to spare)", f"Saved to: {out}"]
        self._run("Embed", work)


def main():
    App().mainloop()

if __name__ == "__main__":
    main()
