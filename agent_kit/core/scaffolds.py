"""Minimal starter file sets written when no codebase was downloaded."""

from types import MappingProxyType

SCAFFOLDS: MappingProxyType[str, MappingProxyType[str, str]] = MappingProxyType({
    "nestjs": MappingProxyType({
        "package.json": """{
  "name": "agent-kit-app",
  "scripts": {
    "start:dev": "nest start --watch",
    "start": "node dist/main"
  },
  "dependencies": {
    "@nestjs/common": "^10.0.0",
    "@nestjs/core": "^10.0.0",
    "@nestjs/platform-express": "^10.0.0",
    "reflect-metadata": "^0.1.13",
    "rxjs": "^7.8.1"
  }
}
""",
        "src/main.ts": 'console.log("Agent Kit NestJS App Running");\n',
    }),
    "express": MappingProxyType({
        "package.json": """{
  "name": "agent-kit-express",
  "scripts": {
    "start": "node index.js"
  },
  "dependencies": {
    "express": "^4.18.2"
  }
}
""",
        "index.js": """const express = require('express');

const app = express();
const port = process.env.PORT || 3000;

app.get('/', (req, res) => res.json({ message: 'Hello Agent Kit Express - Dockerized!' }));

app.listen(port, () => console.log(`Listening on ${port}`));
""",
    }),
    "nextjs": MappingProxyType({
        "package.json": """{
  "name": "agent-kit-web",
  "scripts": {
    "dev": "next dev",
    "build": "next build",
    "start": "next start"
  },
  "dependencies": {
    "next": "14.1.0",
    "react": "^18",
    "react-dom": "^18"
  }
}
""",
        "app/page.tsx": "export default function Home() { return <h1>Hello Agent Kit Next.js - Dockerized!</h1> }\n",
        "next.config.js": "module.exports = { output: 'standalone' }\n",
    }),
    "laravel": MappingProxyType({
        "public/index.php": '<?php echo "Hello Agent Kit Laravel - Dockerized!"; ?>\n',
        "composer.json": """{
    "name": "agent-kit/laravel",
    "type": "project",
    "require": {
        "php": "^8.1"
    }
}
""",
    }),
    "go": MappingProxyType({
        "main.go": """package main

import "fmt"

func main() {
    fmt.Println("Hello Agent Kit Go - Dockerized!")
}
""",
        "go.mod": "module agent-kit-go\n\ngo 1.21\n",
    }),
    "python": MappingProxyType({
        "main.py": """from fastapi import FastAPI

app = FastAPI()


@app.get("/")
def read_root():
    return {"message": "Hello Agent Kit Python - Dockerized!"}
""",
        "requirements.txt": "fastapi\nuvicorn\n",
    }),
    "vue": MappingProxyType({
        "package.json": """{
  "name": "agent-kit-vue",
  "scripts": {
    "dev": "vite",
    "build": "vite build",
    "preview": "vite preview"
  },
  "dependencies": {
    "vue": "^3.4.0"
  },
  "devDependencies": {
    "@vitejs/plugin-vue": "^5.0.0",
    "vite": "^5.0.0"
  }
}
""",
        "index.html": '<!DOCTYPE html><html><body><div id="app"></div><script type="module" src="/src/main.js"></script></body></html>\n',
        "src/main.js": "import { createApp } from 'vue';\nimport App from './App.vue';\ncreateApp(App).mount('#app');\n",
        "src/App.vue": "<template><h1>Hello Agent Kit Vue - Dockerized!</h1></template>\n",
    }),
    "react": MappingProxyType({
        "package.json": """{
  "name": "agent-kit-react",
  "scripts": {
    "dev": "vite",
    "build": "vite build"
  },
  "dependencies": {
    "react": "^18.2.0",
    "react-dom": "^18.2.0"
  },
  "devDependencies": {
    "@vitejs/plugin-react": "^4.2.0",
    "vite": "^5.0.0"
  }
}
""",
        "index.html": '<!DOCTYPE html><html><body><div id="root"></div><script type="module" src="/src/main.jsx"></script></body></html>\n',
        "src/main.jsx": """import React from 'react';
import { createRoot } from 'react-dom/client';

createRoot(document.getElementById('root')).render(<h1>Hello Agent Kit React - Dockerized!</h1>);
""",
    }),
    "angular": MappingProxyType({
        "package.json": """{
  "name": "agent-kit-angular",
  "scripts": {
    "ng": "ng",
    "start": "ng serve",
    "build": "ng build"
  },
  "dependencies": {
    "@angular/common": "^17.0.0",
    "@angular/compiler": "^17.0.0",
    "@angular/core": "^17.0.0",
    "@angular/platform-browser": "^17.0.0",
    "@angular/router": "^17.0.0",
    "rxjs": "~7.8.0",
    "tslib": "^2.3.0",
    "zone.js": "~0.14.0"
  },
  "devDependencies": {
    "@angular-devkit/build-angular": "^17.0.0",
    "@angular/cli": "^17.0.0",
    "@angular/compiler-cli": "^17.0.0",
    "typescript": "~5.2.0"
  }
}
""",
        "src/main.ts": """import { bootstrapApplication } from '@angular/platform-browser';
import { AppComponent } from './app/app.component';

bootstrapApplication(AppComponent).catch((err) => console.error(err));
""",
        "src/app/app.component.ts": """import { Component } from '@angular/core';

@Component({
  selector: 'app-root',
  standalone: true,
  template: '<h1>Hello Agent Kit Angular - Dockerized!</h1>',
})
export class AppComponent {}
""",
    }),
})
