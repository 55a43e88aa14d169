"""The single HTML page. All state comes from the JSON API."""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en" data-theme="light">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Tic Tac Toe</title>
  <style>
    :root {
      --bg: #ffffff;
      --text: #282c34;
      --cell-bg: #f8f9fa;
      --cell-border: #e9ecef;
      --primary: #1976d2;
      --accent: #43a047;
    }
    [data-theme="dark"] {
      --bg: #1a1a1a;
      --text: #ffffff;
      --cell-bg: #2d2d2d;
      --cell-border: #404040;
      --primary: #64b5f6;
      --accent: #81c784;
    }
    body {
      margin: 0;
      min-height: 100vh;
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      font-family: system-ui, sans-serif;
      background: var(--bg);
      color: var(--text);
      transition: background 0.3s, color 0.3s;
    }
    .theme-toggle {
      position: absolute;
      top: 16px;
      right: 16px;
    }
    .ttt-board {
      display: grid;
      grid-template-columns: repeat(3, 80px);
      grid-template-rows: repeat(3, 80px);
      gap: 6px;
      margin: 20px 0;
    }
    .ttt-square {
      font-size: 2.2rem;
      font-weight: 700;
      background: var(--cell-bg);
      border: 2px solid var(--cell-border);
      border-radius: 10px;
      color: var(--text);
      cursor: pointer;
    }
    .ttt-square:disabled { cursor: default; }
    .ttt-square.mark-X { color: var(--primary); }
    .ttt-square.mark-O { color: var(--accent); }
    .ttt-square.winning { border-color: var(--accent); }
    .ttt-status { font-size: 1.3rem; min-height: 1.6em; }
    .ttt-footer { margin-top: 18px; font-size: 0.9rem; opacity: 0.7; }
  </style>
</head>
<body>
  <button id="theme-toggle" class="theme-toggle" aria-label="Switch to dark mode">Dark</button>
  <h1 class="ttt-title">Tic Tac Toe</h1>
  <div id="status" class="ttt-status" aria-live="polite"></div>
  <div id="board" class="ttt-board"></div>
  <button id="restart" class="ttt-restart-btn" aria-label="Restart the game">Restart Game</button>
  <div class="ttt-footer">Local two-player. X vs O</div>
  <script>
    const boardEl = document.getElementById('board');
    const statusEl = document.getElementById('status');
    const themeButton = document.getElementById('theme-toggle');
    const restartButton = document.getElementById('restart');

    for (let i = 0; i < 9; i += 1) {
      const cell = document.createElement('button');
      cell.className = 'ttt-square';
      cell.dataset.index = String(i);
      cell.addEventListener('click', () => send('/api/game/move', { index: i }));
      boardEl.appendChild(cell);
    }

    function applyTheme(theme, label) {
      document.documentElement.setAttribute('data-theme', theme);
      themeButton.setAttribute('aria-label', label);
      themeButton.textContent = theme === 'light' ? 'Dark' : 'Light';
    }

    function render(view) {
      const winning = view.winning_line || [];
      Array.from(boardEl.children).forEach((cell, idx) => {
        const value = view.board[idx];
        cell.textContent = value || '';
        cell.className = 'ttt-square' + (value ? ' mark-' + value : '');
        if (winning.includes(idx)) {
          cell.classList.add('winning');
        }
        cell.disabled = !view.playable.includes(idx);
        cell.setAttribute('aria-label', value ? 'Cell containing ' + value : 'Empty board cell');
      });
      statusEl.textContent = view.status_text;
      applyTheme(view.theme, view.theme_toggle_label);
    }

    async function send(path, body) {
      const response = await fetch(path, {
        method: 'POST',
        headers: { 'Content-Type': 'application/json' },
        body: JSON.stringify(body || {}),
      });
      if (response.ok) {
        render(await response.json());
      }
    }

    themeButton.addEventListener('click', async () => {
      const response = await fetch('/api/theme/toggle', { method: 'POST' });
      if (response.ok) {
        const theme = await response.json();
        applyTheme(theme.theme, theme.toggle_label);
      }
    });
    restartButton.addEventListener('click', () => send('/api/game/reset'));

    fetch('/api/game').then((r) => r.json()).then(render);
  </script>
</body>
</html>
"""
