"""Go microservice template (Golang + Wire + Clean Architecture)."""

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

GO_MOD = '''\
module github.com/example/{{ project_name }}

go 1.22

require (
{% for name, version in requires %}
\t{{ name }} {{ version }}
{% endfor %}
)
'''

MAIN_GO = '''\
package main

import (
\t"log"
\t"net/http"
\t"os"

\t"github.com/example/{{ project_name }}/internal/di"
)

func main() {
\tport := os.Getenv("PORT")
\tif port == "" {
\t\tport = "8080"
\t}

\thandler := di.InitializeHandler()

\tmux := http.NewServeMux()
\tmux.HandleFunc("/health", handler.Health)

\tlog.Printf("{{ project_name }} listening on :%s", port)
\tif err := http.ListenAndServe(":"+port, mux); err != nil {
\t\tlog.Fatal(err)
\t}
}
'''

DOMAIN_GO = '''\
package domain

// Health describes the liveness of the service.
type Health struct {
\tService string `json:"service"`
\tStatus  string `json:"status"`
}
'''

USECASE_GO = '''\
package usecase

import "github.com/example/{{ project_name }}/internal/domain"

// ServiceName is reported by the health endpoint.
const ServiceName = "{{ project_name }}"

// HealthUsecase reports service liveness.
type HealthUsecase struct{}

// NewHealthUsecase builds a HealthUsecase.
func NewHealthUsecase() *HealthUsecase {
\treturn &HealthUsecase{}
}

// Check returns the current health status.
func (u *HealthUsecase) Check() domain.Health {
\treturn domain.Health{Service: ServiceName, Status: "ok"}
}
'''

HANDLER_GO = '''\
package http

import (
\t"encoding/json"
\tnethttp "net/http"

\t"github.com/example/{{ project_name }}/internal/usecase"
)

// Handler exposes usecases over HTTP.
type Handler struct {
\thealth *usecase.HealthUsecase
}

// NewHandler builds a Handler.
func NewHandler(health *usecase.HealthUsecase) *Handler {
\treturn &Handler{health: health}
}

// Health writes the service health as JSON.
func (h *Handler) Health(w nethttp.ResponseWriter, r *nethttp.Request) {
\tw.Header().Set("Content-Type", "application/json")
\t_ = json.NewEncoder(w).Encode(h.health.Check())
}
'''

WIRE_GO = '''\
package di

import (
\t"github.com/google/wire"

\tdelivery "github.com/example/{{ project_name }}/internal/delivery/http"
\t"github.com/example/{{ project_name }}/internal/usecase"
)

// ProviderSet binds usecases to their HTTP delivery layer.
var ProviderSet = wire.NewSet(usecase.NewHealthUsecase, delivery.NewHandler)

// InitializeHandler assembles the HTTP handler graph.
func InitializeHandler() *delivery.Handler {
\treturn delivery.NewHandler(usecase.NewHealthUsecase())
}
'''

MAKEFILE = '''\
BINARY := {{ project_name }}

.PHONY: build run
build:
\tgo build -o bin/$(BINARY) ./cmd/server

run: build
\t./bin/$(BINARY)
'''

MAKEFILE_TEST = '''
.PHONY: test
test:
\tgo test ./...
'''

MAKEFILE_LINT = '''
.PHONY: lint
lint:
\tgolangci-lint run ./...
'''

DOCKERFILE = '''\
FROM golang:1.22-alpine AS build
WORKDIR /src
COPY go.mod go.sum* ./
RUN go mod download
COPY . .
RUN CGO_ENABLED=0 go build -o /out/{{ project_name }} ./cmd/server

FROM gcr.io/distroless/static-debian12
LABEL org.opencontainers.image.title="{{ project_name }}"
COPY --from=build /out/{{ project_name }} /app
EXPOSE 8080
ENTRYPOINT ["/app"]
'''

README = '''\
# {{ project_name }}

Go microservice following Clean Architecture, wired with Google Wire.

## Layout

- `internal/domain` entities
- `internal/usecase` business operations
- `internal/delivery/http` HTTP handlers
- `internal/di` dependency wiring

## Getting started

```bash
make run
```

## Docker

```bash
docker build -t {{ project_name }} .
docker run -p 8080:8080 {{ project_name }}
```
'''

README_TESTS = '''
## Testing

```bash
make test
```
'''

README_LINT = '''
## Linting

```bash
make lint
```
'''

USECASE_TEST_GO = '''\
package usecase

import (
\t"testing"

\t"github.com/stretchr/testify/assert"
)

func TestHealthUsecaseCheck(t *testing.T) {
\tgot := NewHealthUsecase().Check()

\tassert.Equal(t, "ok", got.Status)
\tassert.Equal(t, ServiceName, got.Service)
}
'''

HANDLER_TEST_GO = '''\
package http

import (
\tnethttp "net/http"
\t"net/http/httptest"
\t"testing"

\t"github.com/stretchr/testify/assert"

\t"github.com/example/{{ project_name }}/internal/usecase"
)

func TestHealthHandler(t *testing.T) {
\th := NewHandler(usecase.NewHealthUsecase())
\trec := httptest.NewRecorder()
\treq := httptest.NewRequest(nethttp.MethodGet, "/health", nil)

\th.Health(rec, req)

\tassert.Equal(t, nethttp.StatusOK, rec.Code)
\tassert.Contains(t, rec.Body.String(), `"status":"ok"`)
}
'''

GOLANGCI_YML = '''\
run:
  timeout: 5m

linters:
  enable:
    - errcheck
    - govet
    - staticcheck
    - gofmt
    - goimports
    - revive

issues:
  exclude-use-default: false
'''

CATALOG = TemplateCatalog(
    template=TemplateType.GO_CLEAN_ARCH,
    blueprints=(
        # Baseline
        blueprint(f"{ROOT}/go.mod", GO_MOD),
        blueprint(f"{ROOT}/cmd/server/main.go", MAIN_GO),
        blueprint(f"{ROOT}/internal/domain/health.go", DOMAIN_GO),
        blueprint(f"{ROOT}/internal/usecase/health_usecase.go", USECASE_GO),
        blueprint(f"{ROOT}/internal/delivery/http/handler.go", HANDLER_GO),
        blueprint(f"{ROOT}/internal/di/wire.go", WIRE_GO),
        blueprint(
            f"{ROOT}/Makefile",
            MAKEFILE,
            Fragment(MAKEFILE_TEST, when=when_tests),
            Fragment(MAKEFILE_LINT, when=when_linter),
        ),
        blueprint(f"{ROOT}/Dockerfile", DOCKERFILE),
        blueprint(
            f"{ROOT}/.gitignore",
            "bin/\n*.exe\n.env\n",
            Fragment("coverage.out\n", when=when_tests),
        ),
        blueprint(
            f"{ROOT}/README.md",
            README,
            Fragment(README_TESTS, when=when_tests),
            Fragment(README_LINT, when=when_linter),
        ),
        # Tests
        blueprint(
            f"{ROOT}/internal/usecase/health_usecase_test.go",
            USECASE_TEST_GO,
            when=when_tests,
        ),
        blueprint(
            f"{ROOT}/internal/delivery/http/handler_test.go",
            HANDLER_TEST_GO,
            when=when_tests,
        ),
        # Linter
        blueprint(f"{ROOT}/.golangci.yml", GOLANGCI_YML, when=when_linter),
    ),
    dependencies={
        "requires": (
            DependencyGroup((("github.com/google/wire", "v0.6.0"),)),
            DependencyGroup((("github.com/stretchr/testify", "v1.9.0"),), when=when_tests),
        ),
    },
)
