"""TypeScript/Express microservice template (Express + Inversify + DDD)."""

from __future__ import annotations

from stackgen.models import TemplateType
from stackgen.scaffolder.blueprints import (
    DependencyGroup,
    Fragment,
    TemplateCatalog,
    blueprint,
    when_linter,
    when_tests,
)

ROOT = "{{ project_name }}"

PACKAGE_JSON = '''\
{
  "name": "{{ project_name }}",
  "version": "1.0.0",
  "description": "TypeScript/Express microservice",
  "main": "dist/index.js",
  "private": true,
  "scripts": {{ scripts | json_object(2) }},
  "dependencies": {{ dependencies | json_object(2) }},
  "devDependencies": {{ dev_dependencies | json_object(2) }}
}
'''

TSCONFIG = '''\
{
  "compilerOptions": {
    "target": "ES2021",
    "module": "commonjs",
    "outDir": "dist",
    "rootDir": "src",
    "strict": true,
    "esModuleInterop": true,
    "experimentalDecorators": true,
    "emitDecoratorMetadata": true,
    "skipLibCheck": true
  },
  "include": ["src"]
}
'''

INDEX_TS = '''\
import "reflect-metadata";
import { createApp } from "./app";
import { buildContainer } from "./container";

const port = Number(process.env.PORT ?? 3000);
const app = createApp(buildContainer());

app.listen(port, () => {
  console.log(`{{ project_name }} listening on port ${port}`);
});
'''

APP_TS = '''\
import express, { Application } from "express";
import { Container } from "inversify";
import { HealthController } from "./controllers/health.controller";

export function createApp(container: Container): Application {
  const app = express();
  app.use(express.json());

  const health = container.get(HealthController);
  app.get("/health", health.handle);

  return app;
}
'''

CONTAINER_TS = '''\
import "reflect-metadata";
import { Container } from "inversify";
import { HealthController } from "./controllers/health.controller";
import { HealthService } from "./services/health.service";

export function buildContainer(): Container {
  const container = new Container();
  container.bind(HealthService).toSelf().inSingletonScope();
  container.bind(HealthController).toSelf();
  return container;
}
'''

DOMAIN_HEALTH_TS = '''\
export type HealthState = "ok" | "degraded";

export interface HealthStatus {
  service: string;
  status: HealthState;
  uptimeSeconds: number;
}
'''

HEALTH_SERVICE_TS = '''\
import { injectable } from "inversify";
import { HealthStatus } from "../domain/health";

export const SERVICE_NAME = "{{ project_name }}";

@injectable()
export class HealthService {
  private readonly startedAt = Date.now();

  check(): HealthStatus {
    return {
      service: SERVICE_NAME,
      status: "ok",
      uptimeSeconds: Math.floor((Date.now() - this.startedAt) / 1000),
    };
  }
}
'''

HEALTH_CONTROLLER_TS = '''\
import { Request, Response } from "express";
import { inject, injectable } from "inversify";
import { HealthService } from "../services/health.service";

@injectable()
export class HealthController {
  constructor(@inject(HealthService) private readonly health: HealthService) {}

  handle = (_req: Request, res: Response): void => {
    res.json(this.health.check());
  };
}
'''

DOCKERFILE = '''\
FROM node:20-alpine AS build
WORKDIR /app
COPY package*.json ./
RUN npm ci
COPY tsconfig.json ./
COPY src ./src
RUN npm run build

FROM node:20-alpine
LABEL org.opencontainers.image.title="{{ project_name }}"
WORKDIR /app
ENV NODE_ENV=production
COPY package*.json ./
RUN npm ci --omit=dev
COPY --from=build /app/dist ./dist
EXPOSE 3000
CMD ["node", "dist/index.js"]
'''

README = '''\
# {{ project_name }}

TypeScript/Express microservice using Inversify for dependency injection.

## Getting started

```bash
npm install
npm run dev
```

## Docker

```bash
docker build -t {{ project_name }} .
docker run -p 3000:3000 {{ project_name }}
```
'''

README_TESTS = '''
## Testing

```bash
npm test
```
'''

README_LINT = '''
## Linting

```bash
npm run lint
npm run format
```
'''

JEST_CONFIG = '''\
/** @type {import('jest').Config} */
module.exports = {
  preset: "ts-jest",
  testEnvironment: "node",
  roots: ["<rootDir>/tests"],
};
'''

HEALTH_SERVICE_TEST = '''\
import "reflect-metadata";
import { HealthService, SERVICE_NAME } from "../src/services/health.service";

describe("HealthService", () => {
  it("reports the service as healthy", () => {
    const status = new HealthService().check();

    expect(status.service).toBe(SERVICE_NAME);
    expect(status.status).toBe("ok");
  });
});
'''

APP_TEST = '''\
import "reflect-metadata";
import request from "supertest";
import { createApp } from "../src/app";
import { buildContainer } from "../src/container";

describe("GET /health", () => {
  it("responds with the service status", async () => {
    const res = await request(createApp(buildContainer())).get("/health");

    expect(res.status).toBe(200);
    expect(res.body.service).toBe("{{ project_name }}");
  });
});
'''

ESLINTRC = '''\
{
  "root": true,
  "parser": "@typescript-eslint/parser",
  "plugins": ["@typescript-eslint"],
  "extends": [
    "eslint:recommended",
    "plugin:@typescript-eslint/recommended",
    "prettier"
  ],
  "env": {
    "node": true,
    "es2021": true
  },
  "ignorePatterns": ["dist"]
}
'''

PRETTIERRC = '''\
{
  "semi": true,
  "singleQuote": false,
  "trailingComma": "all",
  "printWidth": 100
}
'''

CATALOG = TemplateCatalog(
    template=TemplateType.TYPESCRIPT_EXPRESS,
    blueprints=(
        # Baseline
        blueprint(f"{ROOT}/package.json", PACKAGE_JSON),
        blueprint(f"{ROOT}/tsconfig.json", TSCONFIG),
        blueprint(f"{ROOT}/src/index.ts", INDEX_TS),
        blueprint(f"{ROOT}/src/app.ts", APP_TS),
        blueprint(f"{ROOT}/src/container.ts", CONTAINER_TS),
        blueprint(f"{ROOT}/src/domain/health.ts", DOMAIN_HEALTH_TS),
        blueprint(f"{ROOT}/src/services/health.service.ts", HEALTH_SERVICE_TS),
        blueprint(f"{ROOT}/src/controllers/health.controller.ts", HEALTH_CONTROLLER_TS),
        blueprint(f"{ROOT}/Dockerfile", DOCKERFILE),
        blueprint(
            f"{ROOT}/.dockerignore",
            "node_modules\ndist\nnpm-debug.log\n.git\n",
            Fragment("coverage\n", when=when_tests),
        ),
        blueprint(
            f"{ROOT}/.gitignore",
            "node_modules/\ndist/\n.env\n",
            Fragment("coverage/\n", when=when_tests),
        ),
        blueprint(
            f"{ROOT}/README.md",
            README,
            Fragment(README_TESTS, when=when_tests),
            Fragment(README_LINT, when=when_linter),
        ),
        # Tests
        blueprint(f"{ROOT}/jest.config.js", JEST_CONFIG, when=when_tests),
        blueprint(f"{ROOT}/tests/health.service.test.ts", HEALTH_SERVICE_TEST, when=when_tests),
        blueprint(f"{ROOT}/tests/app.test.ts", APP_TEST, when=when_tests),
        # Linter
        blueprint(f"{ROOT}/.eslintrc.json", ESLINTRC, when=when_linter),
        blueprint(f"{ROOT}/.prettierrc", PRETTIERRC, when=when_linter),
    ),
    dependencies={
        "scripts": (
            DependencyGroup((
                ("build", "tsc"),
                ("start", "node dist/index.js"),
                ("dev", "ts-node-dev --respawn src/index.ts"),
            )),
            DependencyGroup((
                ("test", "jest"),
                ("test:coverage", "jest --coverage"),
            ), when=when_tests),
            DependencyGroup((
                ("lint", "eslint src --ext .ts"),
                ("format", "prettier --write src"),
            ), when=when_linter),
        ),
        "dependencies": (
            DependencyGroup((
                ("express", "^4.19.2"),
                ("inversify", "^6.0.2"),
                ("reflect-metadata", "^0.2.2"),
            )),
        ),
        "dev_dependencies": (
            DependencyGroup((
                ("@types/express", "^4.17.21"),
                ("@types/node", "^20.12.7"),
                ("ts-node-dev", "^2.0.0"),
                ("typescript", "^5.4.5"),
            )),
            DependencyGroup((
                ("@types/jest", "^29.5.12"),
                ("@types/supertest", "^6.0.2"),
                ("jest", "^29.7.0"),
                ("supertest", "^7.0.0"),
                ("ts-jest", "^29.1.2"),
            ), when=when_tests),
            DependencyGroup((
                ("@typescript-eslint/eslint-plugin", "^7.8.0"),
                ("@typescript-eslint/parser", "^7.8.0"),
                ("eslint", "^8.57.0"),
                ("eslint-config-prettier", "^9.1.0"),
                ("prettier", "^3.2.5"),
            ), when=when_linter),
        ),
    },
)
