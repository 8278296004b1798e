"""Standalone HTML page around the SVG rendering, with pan/zoom and hover highlight."""

from __future__ import annotations

import html

STYLE = """\
    html, body { height: 100%; margin: 0; }
    body { background: #f5f6f8; color: #333; font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial; }
    .page { height: 100vh; box-sizing: border-box; padding: 12px; display: flex; flex-direction: column; }
    .bar { display: flex; gap: 8px; align-items: center; margin-bottom: 10px; }
    .bar button { background: #fff; border: 1px solid #c9ced6; border-radius: 6px; padding: 5px 10px; cursor: pointer; }
    .bar .hint { color: #777; font-size: 12px; }
    .canvas { flex: 1; min-height: 0; overflow: hidden; border: 1px solid #c9ced6; border-radius: 8px; background: #fff; }
    .canvas svg { width: 100%; height: 100%; display: block; touch-action: none; user-select: none; }
    .dim { opacity: 0.15 !important; }
"""

SCRIPT = """\
    (function () {
      const host = document.getElementById('canvas');
      const svg = host.querySelector('svg');
      if (!svg) return;
      const vb = svg.viewBox.baseVal;
      const home = { x: vb.x, y: vb.y, w: vb.width, h: vb.height };

      function zoom(factor, clientX, clientY) {
        const box = svg.getBoundingClientRect();
        const fx = (clientX - box.left) / box.width;
        const fy = (clientY - box.top) / box.height;
        const w = Math.min(home.w * 4, Math.max(home.w * 0.05, vb.width / factor));
        const h = w * (home.h / home.w);
        vb.x += (vb.width - w) * fx;
        vb.y += (vb.height - h) * fy;
        vb.width = w;
        vb.height = h;
      }

      let drag = null;
      svg.addEventListener('pointerdown', (e) => {
        drag = { x: e.clientX, y: e.clientY, vx: vb.x, vy: vb.y };
        svg.setPointerCapture(e.pointerId);
      });
      svg.addEventListener('pointermove', (e) => {
        if (!drag) return;
        const box = svg.getBoundingClientRect();
        vb.x = drag.vx - (e.clientX - drag.x) * (vb.width / box.width);
        vb.y = drag.vy - (e.clientY - drag.y) * (vb.height / box.height);
      });
      svg.addEventListener('pointerup', () => { drag = null; });
      svg.addEventListener('pointercancel', () => { drag = null; });
      svg.addEventListener('wheel', (e) => {
        e.preventDefault();
        zoom(e.deltaY > 0 ? 1 / 1.15 : 1.15, e.clientX, e.clientY);
      }, { passive: false });

      const center = () => {
        const box = svg.getBoundingClientRect();
        return [box.left + box.width / 2, box.top + box.height / 2];
      };
      document.getElementById('zoomIn').addEventListener('click', () => zoom(1.2, ...center()));
      document.getElementById('zoomOut').addEventListener('click', () => zoom(1 / 1.2, ...center()));
      document.getElementById('reset').addEventListener('click', () => {
        vb.x = home.x; vb.y = home.y; vb.width = home.w; vb.height = home.h;
      });

      const links = Array.from(svg.querySelectorAll('#links path'));
      const nodes = Array.from(svg.querySelectorAll('#nodes .node'));
      function highlight(id) {
        if (!id) {
          links.concat(nodes).forEach((el) => el.classList.remove('dim'));
          return;
        }
        const near = new Set([id]);
        links.forEach((p) => {
          const hit = p.dataset.source === id || p.dataset.target === id;
          if (hit) { near.add(p.dataset.source); near.add(p.dataset.target); }
          p.classList.toggle('dim', !hit);
        });
        nodes.forEach((g) => g.classList.toggle('dim', !near.has(g.dataset.id)));
      }
      nodes.forEach((g) => {
        g.addEventListener('mouseenter', () => highlight(g.dataset.id));
        g.addEventListener('mouseleave', () => highlight(null));
      });
    })();
"""


def wrap_html(svg: str, *, title: str) -> str:
    """Embed `svg` in a page with zoom buttons, drag-to-pan, wheel zoom and hover dimming."""
    t = html.escape(title, quote=True)
    return (
        "<!doctype html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8" />\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1" />\n'
        f"  <title>{t}</title>\n"
        f"  <style>\n{STYLE}  </style>\n"
        "</head>\n"
        "<body>\n"
        '  <div class="page">\n'
        '    <div class="bar">\n'
        '      <button id="reset" type="button">Reset</button>\n'
        '      <button id="zoomIn" type="button">Zoom +</button>\n'
        '      <button id="zoomOut" type="button">Zoom -</button>\n'
        '      <span class="hint">Drag to pan, scroll to zoom, hover a node to focus it</span>\n'
        "    </div>\n"
        f'    <div class="canvas" id="canvas">\n{svg}    </div>\n'
        "  </div>\n"
        f"  <script>\n{SCRIPT}  </script>\n"
        "</body>\n"
        "</html>\n"
    )
