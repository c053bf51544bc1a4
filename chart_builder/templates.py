# CSS/HTML/JS templates for the bubble chart page

BASE_CSS = r"""
:root{--bg:#fafafa;--fg:#222;--muted:#666;--accent:#2563eb;--card:#fff;--border:#ddd}
*{box-sizing:border-box}
html,body{margin:0;padding:0;background:var(--bg);color:var(--fg);font:16px/1.5 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial}
a{color:var(--accent);text-decoration:none} a:hover{text-decoration:underline}
.container{max-width:1000px;margin:0 auto;padding:16px}
.card{background:var(--card);border:1px solid var(--border);border-radius:12px;padding:16px}
.small-links{display:flex;flex-wrap:wrap;gap:8px}
.btn{display:inline-flex;align-items:center;justify-content:center;min-width:56px;padding:8px 10px;background:#f1f1f1;border:1px solid var(--border);border-radius:10px;cursor:pointer;font:inherit;color:inherit}
.btn:focus{outline:2px solid var(--accent);outline-offset:2px}
.controls{justify-content:center;margin:12px 0}
.controls .btn.active{background:var(--accent);border-color:var(--accent);color:#fff}
.site-header{margin-bottom:12px}
.legend{color:var(--muted);font-size:.95rem}
footer{margin-top:24px;color:var(--muted);font-size:.9rem}
#chart svg{display:block;margin:0 auto;overflow:visible}
#chart circle.bubble{transition:cx .75s ease, cy .75s ease, fill .75s ease, fill-opacity .75s ease}
#chart.intro circle.bubble{transition:none}
.tooltip{position:absolute;opacity:0;background:#fff;border:1px solid #333;padding:8px;border-radius:4px;pointer-events:none;z-index:10;transition:opacity .2s}
.tooltip small{color:#666}
"""

CHART_HTML = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>%TITLE%</title>
<link rel="stylesheet" href="styles.css" />
</head>
<body>
<div class="container">
  %HEADER%
  %CONTROLS%
  <div class="card">
    <div id="chart" class="intro">
      <svg id="bubbles" width="100%" height="%HEIGHT%" viewBox="0 0 %WIDTH% %HEIGHT%"></svg>
    </div>
  </div>
  <footer>%FOOTER_TEXT%</footer>
</div>
<div class="tooltip" id="tooltip"></div>
<script>__SCRIPT__</script>
</body>
</html>
"""

# Replays precomputed layouts; all positions, labels and styles come from the payload
CHART_JS = r"""
window.CHART_DATA = __PAYLOAD__;
(function(){
  const data = window.CHART_DATA;
  const NS = 'http://www.w3.org/2000/svg';
  const svg = document.getElementById('bubbles');
  const chartEl = document.getElementById('chart');
  const tip = document.getElementById('tooltip');
  let currentKey = data.initialKey;

  function el(name, attrs, parent){
    const node = document.createElementNS(NS, name);
    Object.keys(attrs || {}).forEach(k => node.setAttribute(k, attrs[k]));
    if(parent) parent.appendChild(node);
    return node;
  }

  function drawAxis(){
    const bottom = data.height - data.margin.bottom, top = data.margin.top;
    const grid = el('g', {'class':'grid', 'opacity':0.2}, svg);
    data.ticks.forEach(t => {
      el('line', {x1:t.x, x2:t.x, y1:bottom, y2:top, stroke:'#000', 'stroke-dasharray':'2,2'}, grid);
      const label = el('text', {x:t.x, y:bottom + 20, 'text-anchor':'middle', 'font-size':'14px', fill:'#000'}, svg);
      label.textContent = t.label;
    });
    if(data.centerLine !== null){
      el('line', {x1:data.centerLine, x2:data.centerLine, y1:bottom, y2:top, stroke:'#333', 'stroke-width':1}, svg);
    }
  }

  function drawLegend(){
    const lg = data.legend;
    const g = el('g', {'class':'legend', transform:`translate(${lg.x}, ${lg.y})`}, svg);
    const title = el('text', {x:lg.title_x, y:lg.title_y, 'font-size':'11px', 'font-weight':'bold', fill:'#666'}, g);
    lg.title.forEach((line, i) => {
      const span = el('tspan', {x:lg.title_x, dy: i === 0 ? '0em' : '1.2em'}, title);
      span.textContent = line;
    });
    lg.rings.forEach(r => {
      el('circle', {cx:0, cy:r.cy, r:r.r, fill:'none', stroke:'#bbb', 'stroke-dasharray':'2,2'}, g);
      const t = el('text', {x:0, y:r.label_y, 'text-anchor':'middle', 'font-size':'10px', fill:'#999'}, g);
      t.textContent = r.label;
    });
  }

  drawAxis();
  drawLegend();
  const nodeG = el('g', {}, svg);
  const labelG = el('g', {'pointer-events':'none'}, svg);
  const nodes = data.sources.map((s, i) => el('circle', {'class':'bubble', r:data.radii[i]}, nodeG));
  const labels = data.sources.map(() => el('text', {'font-size':'11px', 'font-weight':'bold', 'text-anchor':'middle', 'dominant-baseline':'middle', fill:'black'}, labelG));

  function place(positions){
    positions.forEach((p, i) => {
      nodes[i].setAttribute('cx', p[0]); nodes[i].setAttribute('cy', p[1]);
      labels[i].setAttribute('x', p[0]); labels[i].setAttribute('y', p[1]);
    });
  }

  function restStyle(i){
    const lay = data.layouts[currentKey];
    nodes[i].setAttribute('fill', lay.fill[i]);
    nodes[i].setAttribute('fill-opacity', lay.opacity[i]);
    nodes[i].setAttribute('stroke', 'none');
    nodes[i].setAttribute('stroke-width', 0);
  }

  nodes.forEach((node, i) => {
    node.addEventListener('mouseover', event => {
      if(data.hover.signed){ node.setAttribute('stroke', '#000'); node.setAttribute('stroke-width', 2); }
      else { node.setAttribute('fill', data.hover.fill); node.setAttribute('stroke', '#333'); node.setAttribute('stroke-width', 1); }
      const lines = data.layouts[currentKey].tooltips[i];
      tip.innerHTML = `<strong>${data.sources[i]}</strong><br/>${lines[0]}<br/><small>${lines[1]}</small>`;
      tip.style.left = (event.pageX + 10) + 'px';
      tip.style.top = (event.pageY - 28) + 'px';
      tip.style.opacity = 1;
    });
    node.addEventListener('mouseout', () => { restStyle(i); tip.style.opacity = 0; });
  });

  window.updateChart = function(key){
    if(!data.layouts.hasOwnProperty(key)){ console.warn('unknown attribute key', key); return; }
    currentKey = key;
    document.querySelectorAll('.controls .btn').forEach(b => b.classList.toggle('active', b.dataset.key === key));
    const lay = data.layouts[key];
    lay.labels.forEach((text, i) => { labels[i].textContent = text; });
    nodes.forEach((n, i) => restStyle(i));
    place(lay.positions);
  };

  // replay the initial settle, then hand over to the transitions
  let frame = 0;
  document.querySelectorAll('.controls .btn').forEach(b => b.addEventListener('click', () => {
    frame = data.intro.length;
    chartEl.classList.remove('intro');
    window.updateChart(b.dataset.key);
  }));
  window.updateChart(currentKey);
  function playIntro(){
    if(frame >= data.intro.length){ chartEl.classList.remove('intro'); return; }
    place(data.intro[frame++]);
    requestAnimationFrame(playIntro);
  }
  playIntro();
})();
"""
